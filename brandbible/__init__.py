"""Brand Bible Generator — mission in, logo + marks + palette + fonts out."""

from .chat import ChatSession, Conversation
from .errors import (
    AssetGenerationError,
    BrandBibleError,
    ConfigError,
    SchemaError,
    TransportError,
    ValidationError,
)
from .models import BrandBible, BrandIdentityPlan, ChatMessage, ColorInfo, FontPairing
from .pipeline import BrandPlanOrchestrator
from .service import GeminiService

__version__ = "0.1.0"
