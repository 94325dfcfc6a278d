from sprite_trigger.input.keyboard import (DEFAULT_BINDINGS, KeyboardTriggers,
                                           TriggerEvent)

__all__ = ["DEFAULT_BINDINGS", "KeyboardTriggers", "TriggerEvent"]
