from enum import Enum, auto

class Category(str, Enum):
    REQUIREMENTS = "requirements"
    DESIGNS      = "designs"
    OUTPUT       = "output"

class SaveOutcome(Enum):
    CREATED     = auto()
    OVERWRITTEN = auto()
    DECLINED    = auto()

class ToolName(str, Enum):
    REQUIREMENT_ANALYSIS = "requirement_analysis"
    EXTERNAL_DESIGN      = "external_design"
    SAVE_DOCUMENT        = "save_document"
    GENERATE_UML         = "generate_uml"
    GENERATE_LAYOUT      = "generate_layout"
