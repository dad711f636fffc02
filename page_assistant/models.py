# page_assistant/models.py
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictStr

class Intent(str, Enum):
    NONE = "none"
    DOM = "dom"
    STYLES = "styles"
    PAGE_INFO = "page-info"
    IMAGES = "images"
    NETWORK = "network"

class Scenario(str, Enum):
    PERFORMANCE_BOTTLENECK = "performance-bottleneck"
    OPTIMIZATION = "optimization"
    ACCESSIBILITY = "accessibility"

class ScenarioContext(BaseModel):
    scenario: Scenario
    text: str

class PromptMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str

class Suggestion(BaseModel):
    id: str
    label: str
    action: Literal["generateSrcset", "viewOptimization", "checkAccessibility", "analyzeMore"]
    params: Dict[str, Any] = Field(default_factory=dict)

class AskRequest(BaseModel):
    question: StrictStr = Field(min_length=1)
    context: Optional[str] = None

class AskResponse(BaseModel):
    answer: str
    context: str
    suggestions: List[Suggestion]

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class ServiceStatus(BaseModel):
    message: str
    llm: str
    timestamp: str
    features: List[str]
