import logging
from dataclasses import asdict
from io import BytesIO
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, StreamingResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

import config
from calculator import compute_plan, goal_copy
from models import PlanResult
from validation import PlanInputError, parse_plan_input


logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger(__name__)

if config.SESSION_SECRET_IS_TEMPORARY:
    log.warning(
        "SESSION_SECRET_KEY not set in .env. Using temporary key for this session."
    )

app = FastAPI(title="Macro Planner")
templates = Jinja2Templates(directory=str(config.TEMPLATES_DIR))
templates.env.filters["thousands"] = lambda value: f"{value:,}"

# Session holds the last submitted form and its plan, nothing else
app.add_middleware(SessionMiddleware, secret_key=config.SESSION_SECRET_KEY)


def _page_context(form: Optional[dict] = None, error: Optional[str] = None) -> dict:
    return {
        "form": form or {},
        "error": error,
        "contact_handle": config.CONTACT_HANDLE,
        "contact_url": config.CONTACT_URL,
    }


def _results_context(form: dict, plan: PlanResult) -> dict:
    context = _page_context(form)
    context.update(
        {
            "plan": plan,
            "goal": goal_copy(form.get("goal", "").strip().lower()),
        }
    )
    return context


def render_pdf(html_content: str) -> BytesIO:
    from weasyprint import HTML

    pdf_io = BytesIO()
    HTML(string=html_content, base_url=config.BASE_URL).write_pdf(pdf_io)
    pdf_io.seek(0)
    return pdf_io


def _form_fields(
    age: str,
    sex: str,
    height: str,
    weight: str,
    activity: str,
    goal: str,
    meals: str,
) -> Dict[str, str]:
    return {
        "age": age,
        "sex": sex,
        "height": height,
        "weight": weight,
        "activity": activity,
        "goal": goal,
        "meals": meals,
    }


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(
        request,
        "form.html",
        _page_context(request.session.get("last_form")),
    )


@app.post("/calculate", response_class=HTMLResponse)
async def calculate_view(
    request: Request,
    age: str = Form(""),
    sex: str = Form(""),
    height: str = Form(""),
    weight: str = Form(""),
    activity: str = Form(""),
    goal: str = Form(""),
    meals: str = Form(""),
):
    form = _form_fields(age, sex, height, weight, activity, goal, meals)
    request.session["last_form"] = form

    try:
        plan_input = parse_plan_input(form)
    except PlanInputError as e:
        # Never leave an older plan on screen for a rejected submission
        request.session.pop("last_plan", None)
        log.info("Rejected plan input (%s): %s", e.field, e.message)
        return templates.TemplateResponse(
            request,
            "form.html",
            _page_context(form, e.message),
            status_code=400,
        )

    plan = compute_plan(plan_input)
    log.debug("Computed plan %s for %s", plan, plan_input)
    request.session["last_plan"] = plan.to_dict()

    return templates.TemplateResponse(
        request,
        "results.html",
        _results_context(form, plan),
    )


@app.get("/results", response_class=HTMLResponse)
async def results_view(request: Request):
    """
    Show the plan from the last accepted submission, if any.
    """
    held = request.session.get("last_plan")
    if not held:
        return RedirectResponse(url="/", status_code=303)

    try:
        plan = PlanResult(**held)
    except TypeError:
        request.session.pop("last_plan", None)
        return RedirectResponse(url="/", status_code=303)

    return templates.TemplateResponse(
        request,
        "results.html",
        _results_context(request.session.get("last_form") or {}, plan),
    )


@app.post("/report")
async def report_pdf(
    request: Request,
    age: str = Form(""),
    sex: str = Form(""),
    height: str = Form(""),
    weight: str = Form(""),
    activity: str = Form(""),
    goal: str = Form(""),
    meals: str = Form(""),
):
    form = _form_fields(age, sex, height, weight, activity, goal, meals)
    try:
        plan_input = parse_plan_input(form)
    except PlanInputError as e:
        raise HTTPException(status_code=400, detail=e.message)

    plan = compute_plan(plan_input)

    template = templates.get_template("pdf_report.html")
    html_content = template.render(**_results_context(form, plan))

    filename = f"macro_plan_{plan_input.goal}_{plan.target_calories}.pdf"

    return StreamingResponse(
        render_pdf(html_content),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/api/plan")
async def plan_api(payload: Dict[str, Any] = Body(...)):
    try:
        plan_input = parse_plan_input(payload)
    except PlanInputError as e:
        raise HTTPException(
            status_code=422,
            detail={"field": e.field, "message": e.message},
        )

    plan = compute_plan(plan_input)
    return {
        "input": asdict(plan_input),
        "plan": plan.to_dict(),
        "goal_label": goal_copy(plan_input.goal)["label"],
    }
