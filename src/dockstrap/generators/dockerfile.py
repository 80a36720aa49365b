"""Dockerfile generation for Express.js projects."""

from jinja2 import Template

from dockstrap.models.analysis import FrameworkAnalysis
from dockstrap.models.docker import DockerOptions
from dockstrap.settings import get_settings

DOCKERFILE_TEMPLATE = Template(
    """\
FROM node:{{ node_version }}
WORKDIR /app

# Install dependencies
COPY package*.json ./
{% if development %}
RUN npm install --include=dev
{% elif typescript %}
RUN npm install
{% else %}
RUN npm install --omit=dev
{% endif %}

# Copy source code
COPY . .
{% if typescript %}

# Build TypeScript
RUN npm run build
{% endif %}

{% if development %}
# Development setup
ENV NODE_ENV=development
{% else %}
# Production setup
ENV NODE_ENV=production
{% endif %}
ENV PORT={{ port }}
EXPOSE {{ port }}
CMD {{ command }}
""",
    trim_blocks=True,
    keep_trailing_newline=True,
)


def resolve_port(info: FrameworkAnalysis, options: DockerOptions) -> int:
    """Port precedence: explicit option, then detected port, then settings default."""
    if options.port is not None:
        return options.port
    if info.port is not None:
        return info.port
    return get_settings().default_port


def start_command(development: bool) -> str:
    """Exec-form CMD for the container."""
    if development:
        return '["npm", "run", "dev"]'
    return '["npm", "start"]'


def render_dockerfile(info: FrameworkAnalysis, options: DockerOptions | None = None) -> str:
    """Render a Dockerfile for an analyzed Express project.

    Args:
        info: Result of Express analysis.
        options: User overrides. Unset fields fall back to detected values.

    Returns:
        Dockerfile content.
    """
    options = options or DockerOptions()
    typescript = info.uses_typescript if options.typescript is None else options.typescript

    return DOCKERFILE_TEMPLATE.render(
        node_version=options.node_version,
        typescript=typescript,
        development=options.development,
        port=resolve_port(info, options),
        command=start_command(options.development),
    )
