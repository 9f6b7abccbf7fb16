"""
Sidebar policy input helpers, generated from the policy form catalogue.
"""

from __future__ import annotations

from typing import Any


POLICY_ICONS = {
    "tax": "💰",
    "subsidy": "🎁",
    "price_control": "⚖️",
    "trade": "🚢",
}


def policy_type_label(config: Any) -> str:
    """Radio label for a policy family."""
    return f"{POLICY_ICONS.get(config.type.value, '📋')} {config.name}"


def render_parameter_input(st_module: Any, parameter: Any, key_prefix: str) -> Any:
    """
    Render one catalogue parameter and return its raw value.

    Numeric controls are rendered with float bounds so Streamlit never sees
    mixed int/float arguments.
    """
    key = f"{key_prefix}_{parameter.id}"
    label = f"{parameter.name} ({parameter.unit})" if parameter.unit else parameter.name

    if parameter.kind == "select":
        values = [value for value, _ in parameter.options]
        labels = dict(parameter.options)
        index = values.index(parameter.value) if parameter.value in values else 0
        return st_module.selectbox(
            label,
            options=values,
            index=index,
            format_func=lambda value: labels.get(value, value),
            key=key,
        )

    if parameter.kind == "range":
        return st_module.slider(
            label,
            min_value=float(parameter.min),
            max_value=float(parameter.max),
            value=float(parameter.value),
            step=float(parameter.step),
            key=key,
        )

    return st_module.number_input(
        label,
        min_value=float(parameter.min) if parameter.min is not None else None,
        max_value=float(parameter.max) if parameter.max is not None else None,
        value=float(parameter.value),
        step=float(parameter.step) if parameter.step is not None else 1.0,
        key=key,
    )


def render_policy_inputs(st_module: Any, config: Any) -> dict[str, Any]:
    """
    Render the form for one policy family and return raw parameters.
    """
    st_module.subheader(config.name)
    st_module.caption(config.description)

    return {
        parameter.id: render_parameter_input(st_module, parameter, key_prefix=config.type.value)
        for parameter in config.parameters
    }
