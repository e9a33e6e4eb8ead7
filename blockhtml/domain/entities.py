from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

# --- Editor Document ---

class EditorBlock(BaseModel):
    # Editors attach extra keys such as "tunes"; they are carried, not checked
    model_config = ConfigDict(extra="allow")

    id: StrictStr | None = None
    type: StrictStr
    data: dict[str, Any]

class EditorDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    time: int | float | None = None
    version: StrictStr | None = None
    blocks: list[EditorBlock]
