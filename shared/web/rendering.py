from decimal import Decimal

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from shared.config.settings import Settings


def format_price(value) -> str:
    return f"{Decimal(str(value)):.2f}"


def build_templates(settings: Settings) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(settings.template_dir))
    templates.env.filters["price"] = format_price
    return templates


def render(request: Request, template_name: str, page: BaseModel, status_code: int = 200):
    """Render ``template_name`` with a typed page model, exposed to Jinja as ``page``."""
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(request, template_name, {"page": page}, status_code=status_code)
