"""Componentes de UI da aplicação FastHTML"""

from .layout import page_layout, camara_layout, navbar
from .tables import user_table, user_row, USERS_TABLE_ID
from .forms import user_form_modal, email_feedback, submit_button, form_feedback, chamber_select
from .cards import card, alert, flash_message, role_badge, active_badge
from .modals import modal, modal_container, confirm_delete_modal, MODAL_CONTAINER_ID
from .sidebar import camara_sidebar, SidebarState, MenuGroup, sidebar_url

__all__ = [
    # Layout
    "page_layout",
    "camara_layout",
    "navbar",
    # Tables
    "user_table",
    "user_row",
    "USERS_TABLE_ID",
    # Forms
    "user_form_modal",
    "email_feedback",
    "submit_button",
    "form_feedback",
    "chamber_select",
    # Cards
    "card",
    "alert",
    "flash_message",
    "role_badge",
    "active_badge",
    # Modals
    "modal",
    "modal_container",
    "confirm_delete_modal",
    "MODAL_CONTAINER_ID",
    # Sidebar
    "camara_sidebar",
    "SidebarState",
    "MenuGroup",
    "sidebar_url",
]
