"""User browser screen: a table of users with a popup of export options."""

from __future__ import annotations

from pagewire import Wire, wire_path
from pagewire.ui.components import Button, Composite, PopupButton, Table


@wire_path("sec$User.browse")
class UserBrowse(Composite):

    users_table: Table = Wire("usersTable")
    create_button: Button = Wire("createBtn")
    export_button: PopupButton = Wire("excelBtn")
