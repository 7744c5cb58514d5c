# tfjson/models/wire.py

from typing import Any, Dict

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer


class WireModel(BaseModel):
    """Base for document models: members that are None are omitted on encode.

    Unknown members in the input are ignored, so documents written by newer
    producers still decode.
    """

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


__all__ = ["WireModel"]
