"""
Jinja2 follow-up renderer - Implements FollowUpRenderer protocol.

Templates live in the `templates/` directory next to this module and are
autoescaped, so user-supplied names, titles and descriptions cannot inject
markup into the message.
"""

import logging
from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from followup_notifier.domain.ports import RequestRecord, UserRecord

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
FOLLOW_UP_TEMPLATE = "follow_up.html.j2"


def format_date(value: datetime) -> str:
    """Format a timestamp as a long-form date, e.g. "January 1, 2024"."""
    return f"{value:%B} {value.day}, {value.year}"


class JinjaFollowUpRenderer:
    """
    Implements FollowUpRenderer protocol with a Jinja2 environment.

    Stateless after construction; one instance is shared per process.
    """

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            undefined=StrictUndefined,
        )

    def render(self, user: UserRecord, request: RequestRecord, request_link: str) -> str:
        """Render the follow-up body for one user and request."""
        template = self._env.get_template(FOLLOW_UP_TEMPLATE)
        return template.render(
            full_name=user.full_name,
            title=request.title,
            description=request.description,
            created_on=format_date(request.created_at),
            request_link=request_link,
        )
