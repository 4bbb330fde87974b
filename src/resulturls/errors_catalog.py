"""Actionable error catalog for resulturls."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "invalid_test_id": {
        "what": "Test id '{test_id}' cannot be mapped to a results directory.",
        "next": "Use an id shaped like `YYMMDD_XXXX` or `YYMMDD_XXXX_N`, or switch to standard URLs.",
    },
    "config_not_found": {
        "what": "Config file not found: {path}",
        "next": "Check the path passed to `--config` or remove the option.",
    },
    "missing_base_url": {
        "what": "No base URL was provided.",
        "next": "Pass `--base-url` or set `base_url` in the config file.",
    },
    "missing_test_id": {
        "what": "No test id was provided.",
        "next": "Pass `--test-id` or set `test_id` in the config file.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
