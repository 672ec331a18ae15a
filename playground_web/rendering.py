"""HTML rendering for the browser client.

Templates are rendered with autoescaping on, so names, skills, project titles
and links from the API are always inserted as text.
"""

from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import urlsplit

import jinja2
import structlog

logger = structlog.get_logger()

TEMPLATE_DIR = Path(__file__).parent / "templates"

SAFE_LINK_SCHEMES = ("http", "https", "mailto")


def link_label(url: str) -> str:
    """Hostname of ``url``, or the raw string when it cannot be parsed."""
    try:
        hostname = urlsplit(url).hostname
    except (ValueError, TypeError, AttributeError):
        return url
    return hostname or url


def safe_href(url: str) -> str:
    """Keep a link only if it uses a web or mail scheme."""
    try:
        scheme = urlsplit(url).scheme.lower()
    except (ValueError, TypeError, AttributeError):
        return "#"
    return url if scheme in SAFE_LINK_SCHEMES else "#"


def create_environment(template_dir: Optional[Path] = None) -> jinja2.Environment:
    """Build the Jinja2 environment with the client's filters."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["link_label"] = link_label
    env.filters["safe_href"] = safe_href
    return env


env = create_environment()


def render(template_name: str, **context) -> str:
    return env.get_template(template_name).render(**context)


def render_page(api_base_url: str) -> str:
    return render("index.html", api_base_url=api_base_url)


def render_error(message: str) -> str:
    return render("_message.html", css_class="error", message=message)


def render_status(message: str, kind: str = "success") -> str:
    """Status banner, swapped out-of-band into the page header."""
    return render("_status.html", message=message, kind=kind)


def render_clear(container_id: str) -> str:
    """Empty the given pane out-of-band."""
    return render("_clear.html", container_id=container_id)


def render_profiles(profiles: Iterable[dict]) -> str:
    return render("_profiles.html", profiles=list(profiles))


def render_projects(projects: Iterable[dict]) -> str:
    return render("_projects.html", projects=list(projects))


def render_profile_form(oob: bool = False) -> str:
    return render("_profile_form.html", oob=oob)
