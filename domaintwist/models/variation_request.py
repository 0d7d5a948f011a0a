from pydantic import BaseModel
from typing import Dict, List, Literal, Optional

class VariationRequest(BaseModel):
    domain: str
    engines: Optional[List[str]] = None
    dictionary: Optional[Dict[str, List[str]]] = None
    dictionary_url: Optional[str] = None
    output_format: Literal["json", "csv", "list"] = "json"
    unicode: bool = False
    valid_only: bool = False
