"""Infer backing services from environment variable names."""

import re
from collections.abc import Mapping

from dockstrap.models.analysis import ServiceDescriptor

# Order matters: the first pattern matching a variable name wins.
SERVICE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"DB_HOST|DATABASE_URL"), "Database"),
    (re.compile(r"REDIS_URL|REDIS_HOST"), "Redis"),
    (re.compile(r"MONGODB_URI|MONGO_URL"), "MongoDB"),
    (re.compile(r"ELASTIC_URL|ELASTICSEARCH"), "Elasticsearch"),
    (re.compile(r"RABBIT_URL|RABBITMQ"), "RabbitMQ"),
    (re.compile(r"KAFKA_BROKERS|KAFKA_URL"), "Kafka"),
]

OPTIONAL_MARKER = "OPTIONAL"


def match_service(name: str) -> str | None:
    """Return the service name implied by an env var name, or None."""
    for pattern, service in SERVICE_PATTERNS:
        if pattern.search(name):
            return service
    return None


def infer_service_variables(
    variables: Mapping[str, str],
) -> list[tuple[str, ServiceDescriptor]]:
    """Detect external services, keeping the variable each one came from.

    Args:
        variables: Env var name to value, iterated in mapping order.

    Returns:
        (variable name, descriptor) per matching variable. A service is
        optional when the variable name contains ``OPTIONAL``.
    """
    matches = []
    for key, value in variables.items():
        service = match_service(key)
        if service is None:
            continue
        descriptor = ServiceDescriptor(
            name=service, url=value, required=OPTIONAL_MARKER not in key
        )
        matches.append((key, descriptor))
    return matches


def infer_services(variables: Mapping[str, str]) -> list[ServiceDescriptor]:
    """Detect external services from environment variables, one per matching variable."""
    return [descriptor for _key, descriptor in infer_service_variables(variables)]
