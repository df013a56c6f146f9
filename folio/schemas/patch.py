from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

PatchOp = Literal["add", "remove", "replace", "move", "copy", "test"]


class PatchOperation(BaseModel):
    """One JSON Patch (RFC 6902) operation."""

    model_config = ConfigDict(populate_by_name=True)

    op: PatchOp
    path: str
    from_: str | None = Field(None, alias="from")
    value: Any = None

    @model_validator(mode="after")
    def check_operands(self):
        if self.op in ("move", "copy") and self.from_ is None:
            raise ValueError(f"'{self.op}' operation requires 'from'")
        if self.op in ("add", "replace", "test") and "value" not in self.model_fields_set:
            raise ValueError(f"'{self.op}' operation requires 'value'")
        return self
