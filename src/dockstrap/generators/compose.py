"""docker-compose.yml generation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from jinja2 import Template

from dockstrap.generators.dockerfile import resolve_port
from dockstrap.models.analysis import FrameworkAnalysis, ServiceDescriptor
from dockstrap.models.docker import DockerOptions
from dockstrap.templates.services import SERVICE_TEMPLATES, get_env_value, service_key

logger = logging.getLogger(__name__)

COMPOSE_TEMPLATE = Template(
    """\
services:
  app:
    build: .
    ports:
      - "{{ port }}:{{ port }}"
    environment:
      - PORT={{ port }}
{% for svc in services %}
{% for name, value in svc.env.items() %}
      - {{ name }}={{ value }}
{% endfor %}
{% endfor %}
    volumes:
      - .:/app
      - /app/node_modules
{% for volume in volumes %}
      - {{ volume }}
{% endfor %}
    command: {{ command }}
{% if services %}
    depends_on:
{% for svc in services %}
      - {{ svc.key }}
{% endfor %}
{% endif %}
{% if networks %}
    networks:
{% for network in networks %}
      - {{ network }}
{% endfor %}
{% endif %}
{% for svc in services %}

  {{ svc.key }}:
    image: {{ svc.template.image }}
{% if svc.template.environment %}
    environment:
{% for name, value in svc.template.environment.items() %}
      {{ name }}: "{{ value }}"
{% endfor %}
{% endif %}
    ports:
{% for mapping in svc.template.ports %}
      - "{{ mapping }}"
{% endfor %}
{% if networks %}
    networks:
{% for network in networks %}
      - {{ network }}
{% endfor %}
{% endif %}
{% endfor %}
{% if networks %}

networks:
{% for network in networks %}
  {{ network }}:
{% endfor %}
{% endif %}
""",
    trim_blocks=True,
    keep_trailing_newline=True,
)


@dataclass
class ComposeService:
    """A backing-service container to render next to the app."""

    key: str
    template: dict
    env: dict[str, str] = field(default_factory=dict)


def resolve_services(
    service_variables: Iterable[tuple[str, ServiceDescriptor]],
    include_optional: bool = True,
) -> list[ComposeService]:
    """Map inferred services to compose containers, one per container type.

    Args:
        service_variables: (variable name, service) pairs from .env.example.
        include_optional: Whether optional services get a container.

    Returns:
        Containers in first-seen order. Each carries the app env vars that
        point at it, keyed by the original variable names.
    """
    resolved: dict[str, ComposeService] = {}
    for variable, descriptor in service_variables:
        if not descriptor.required and not include_optional:
            continue
        key = service_key(descriptor)
        if key is None:
            logger.debug("No container template for service %s", descriptor.name)
            continue
        if key not in resolved:
            resolved[key] = ComposeService(key=key, template=SERVICE_TEMPLATES[key])
        resolved[key].env[variable] = get_env_value(key, variable)
    return list(resolved.values())


def render_compose(
    info: FrameworkAnalysis,
    options: DockerOptions | None = None,
    service_variables: Iterable[tuple[str, ServiceDescriptor]] = (),
    include_optional: bool = True,
) -> str:
    """Render docker-compose.yml for an analyzed Express project.

    Args:
        info: Result of Express analysis.
        options: User overrides. Unset fields fall back to detected values.
        service_variables: (variable name, service) pairs from .env.example.
        include_optional: Whether optional services get a container.

    Returns:
        docker-compose.yml content.
    """
    options = options or DockerOptions()

    return COMPOSE_TEMPLATE.render(
        port=resolve_port(info, options),
        command="npm run dev" if options.development else "npm start",
        services=resolve_services(service_variables, include_optional),
        volumes=options.volumes,
        networks=options.networks,
    )
