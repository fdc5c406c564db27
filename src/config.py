import os
from enum import Enum
from dotenv import load_dotenv

# Validation limits
MIN_PRICE = 0.0

# Display configuration
CURRENCY_SYMBOL = "$"
LABEL_WIDTH = 15
VALUE_WIDTH = 18

# Tool and result definitions
class ToolType(Enum):
    DRILL = "Drill"
    SAW = "Saw"
    SANDER = "Sander"
    GRINDER = "Grinder"

    @classmethod
    def from_name(cls, name):
        """Case-insensitive lookup, None when the name is not a known tool type"""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            return None
        for tool_type in cls:
            if tool_type.value.lower() == name.lower():
                return tool_type
        return None

DEFAULT_TOOL_TYPE = ToolType.DRILL

class LoanResult(Enum):
    BORROWED = "borrowed"
    ALREADY_ON_LOAN = "already_on_loan"
    RETURNED = "returned"
    PRICE_UPDATED = "price_updated"
    INVALID_PRICE = "invalid_price"

class EnvironmentLoader:
    @staticmethod
    def load():
        load_dotenv()
        wait_for_key = os.getenv("POWER_TOOL_WAIT_FOR_KEY", "1").strip().lower()
        return {"wait_for_key": wait_for_key not in ("0", "false", "no")}
