from blockhtml.rules.loader import DEFAULT_RULES_PATH, load_default_rules, load_rules
from blockhtml.rules.models import (
    BlockProperty,
    BlockSchema,
    BlocksRules,
    DocumentRules,
    InlineRules,
    LinkRules,
    Rules,
)

__all__ = [
    "DEFAULT_RULES_PATH",
    "BlockProperty",
    "BlockSchema",
    "BlocksRules",
    "DocumentRules",
    "InlineRules",
    "LinkRules",
    "Rules",
    "load_default_rules",
    "load_rules",
]
