"""Form body dependency for the HTML (editor, settings) routes."""

from typing import Any

from fastapi import Request

MULTI_VALUE_SUFFIX = "[]"


async def get_form_data(request: Request) -> dict[str, Any]:
    """Submitted fields as a dict. '<name>[]' fields become lists under '<name>'."""
    form = await request.form()
    data: dict[str, Any] = {}
    for name in form.keys():
        if name.endswith(MULTI_VALUE_SUFFIX):
            data[name[: -len(MULTI_VALUE_SUFFIX)]] = form.getlist(name)
        else:
            data[name] = form.get(name)
    return data
