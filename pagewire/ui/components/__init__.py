"""
================================================================================
Built-in Components
================================================================================

Contracts and implementations of the web framework's components. Each
contract is registered with its implementation in DEFAULT_COMPONENTS, the
table every ComponentRegistry starts from.

Author: Automation Team
License: MIT
================================================================================
"""

from .base import AbstractComponent
from .button import Button, ButtonImpl
from .composite import Composite
from .fields import (
    CheckBox,
    CheckBoxImpl,
    Label,
    LabelImpl,
    PasswordField,
    PasswordFieldImpl,
    TextField,
    TextFieldImpl,
)
from .popup_button import PopupButton, PopupButtonImpl, PopupContent
from .table import Table, TableImpl, TableRow
from .untyped import GroupBox, GroupBoxImpl, Untyped, UntypedImpl

DEFAULT_COMPONENTS = {
    Untyped: UntypedImpl,
    Button: ButtonImpl,
    TextField: TextFieldImpl,
    PasswordField: PasswordFieldImpl,
    CheckBox: CheckBoxImpl,
    Label: LabelImpl,
    Table: TableImpl,
    PopupButton: PopupButtonImpl,
    GroupBox: GroupBoxImpl,
}

__all__ = [
    "DEFAULT_COMPONENTS",
    "AbstractComponent",
    "Composite",
    "Untyped",
    "Button",
    "TextField",
    "PasswordField",
    "CheckBox",
    "Label",
    "Table",
    "TableRow",
    "PopupButton",
    "PopupContent",
    "GroupBox",
]
