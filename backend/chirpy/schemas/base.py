"""
Chirpy Backend — Request Params Base Model
============================================

What:  Shared key-matching rules for JSON request bodies.
How:   A before-validator rewrites the decoded object so that:
         - a key matches a field name case-insensitively when the exact
           name is absent ({"Body": "x"} fills `body`; a later fold wins
           over an earlier one),
         - an explicit null leaves the field at its default
           ({"body": null} decodes like {}).
       Non-object payloads are passed through untouched so Pydantic
       rejects them.
"""

from typing import Any

from pydantic import BaseModel, model_validator


class RequestParams(BaseModel):
    """Base for the *Params models decoded by chirpy.routes.decoding."""

    @model_validator(mode="before")
    @classmethod
    def match_keys_like_json_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        matched = dict(data)
        for name in cls.model_fields:
            if name not in data:
                for key, value in data.items():
                    if isinstance(key, str) and key.lower() == name.lower():
                        matched[name] = value
            if name in matched and matched[name] is None:
                del matched[name]
        return matched
