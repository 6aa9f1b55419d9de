"""Classification functions for control-flow tasks and data-flow components."""

from ..models import (
    CONFIGURATION_TYPES, EXECUTE_PACKAGE_TASK, SEQUENCE_CONTAINER,
    SEQUENCE_CONTAINER_TYPE, VERBATIM_TASK_DESCRIPTIONS
)


def _before_semicolon(value: str) -> str:
    return value.split(';', 1)[0].strip()


def classify_task(object_name: str, contact: str, description: str,
                  executable_type: str, has_package_payload: bool = False) -> str:
    """
    Infer the type label of a control-flow task

    The rule order matters: vendor components put their display name in
    front of the first semicolon of the contact string, while several
    Microsoft tasks carry an empty or generic contact string.

    Args:
        object_name: Task name, last resort when nothing else is set
        contact: TaskContact string
        description: Task description
        executable_type: ExecutableType attribute
        has_package_payload: Whether the task carries ExecutePackageTask object data

    Returns:
        Non-empty type label
    """
    if has_package_payload:
        return EXECUTE_PACKAGE_TASK

    if executable_type == SEQUENCE_CONTAINER_TYPE:
        return SEQUENCE_CONTAINER

    contact = contact or ''
    description = description or ''

    if description in VERBATIM_TASK_DESCRIPTIONS or contact.startswith('Microsoft'):
        label = description
    else:
        label = _before_semicolon(contact)

    return label or description or object_name or 'Task'


def classify_component(contact_info: str, description: str, name: str) -> str:
    """Contact info up to the first semicolon, then description, then component name"""
    label = _before_semicolon(contact_info or '')
    if label:
        return label
    if description:
        return description
    return name or 'Component'


def configuration_type_label(configuration_type) -> str:
    """Map a ConfigurationType value to its display label"""
    raw = str(configuration_type).strip()
    try:
        code = int(raw)
    except ValueError:
        return f"Unknown {raw}"
    return CONFIGURATION_TYPES.get(code, f"Unknown {code}")
