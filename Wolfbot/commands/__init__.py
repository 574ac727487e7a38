import json

from Wolfbot.runtime import humanize, metrics_inc

from . import wolf
from .interaction import Interaction, ConsoleInteraction


_COMMAND_MODULES = [
    wolf,
]


def _spec_required_args(raw_spec):
    explicit = raw_spec.get("required") or []
    return [str(x) for x in explicit if str(x).strip()]


def _enrich_spec(module):
    raw = module.spec() or {}
    spec = dict(raw)
    spec.setdefault("args", {})
    spec.setdefault("description", "")
    spec["required"] = _spec_required_args(spec)
    return spec


COMMAND_SPECS = [_enrich_spec(m) for m in _COMMAND_MODULES]


def commands_for_registration():
    """Command specs in the shape hosts use to register slash commands."""
    out = []
    for c in COMMAND_SPECS:
        required = set(c.get("required") or [])
        out.append(
            {
                "name": c.get("name"),
                "description": c.get("description", ""),
                "options": [
                    {"name": k, "type": v, "required": k in required}
                    for k, v in (c.get("args") or {}).items()
                ],
            }
        )
    return json.dumps(out, ensure_ascii=False)


def get_command_spec(command_name):
    for spec in COMMAND_SPECS:
        if spec.get("name") == command_name:
            return spec
    return None


def run_command(*, command_name, command_args, interaction, **extra):
    """
    Validate arguments and dispatch to the command module.
    Missing arguments are answered with an ephemeral reply without running the command.
    """
    for m in _COMMAND_MODULES:
        if m.spec().get("name") != command_name:
            continue
        module_spec = get_command_spec(command_name) or {}
        sanitized_args, missing_required = _sanitize_command_args(module_spec, command_args or {})
        if missing_required:
            metrics_inc(f"{command_name}.missing_required_args")
            interaction.edit_original(
                humanize("missing_required_args", "Missing: " + ", ".join(missing_required)),
                ephemeral=True,
            )
            return {
                "ok": False,
                "command_name": command_name,
                "error_code": "missing_required_args",
                "missing_args": missing_required,
            }
        raw = m.run(interaction=interaction, **sanitized_args, **extra)
        if isinstance(raw, dict):
            raw.setdefault("command_name", command_name)
            return raw
        return {"ok": bool(raw), "command_name": command_name}

    raise ValueError("Unknown command: " + str(command_name))


def _coerce_value(value, expected_type):
    if str(expected_type or "").strip().lower() in ("string", "str"):
        return str(value)
    return value


def _sanitize_command_args(spec, command_args):
    args_spec = (spec or {}).get("args") or {}
    required = list((spec or {}).get("required") or [])
    incoming = command_args or {}
    clean = {}
    for k, expected_type in args_spec.items():
        if k not in incoming or incoming.get(k) is None:
            continue
        clean[k] = _coerce_value(incoming.get(k), expected_type)

    missing = []
    for k in required:
        v = clean.get(k)
        if v is None:
            missing.append(k)
            continue
        if isinstance(v, str) and not v.strip():
            missing.append(k)
    return clean, missing
