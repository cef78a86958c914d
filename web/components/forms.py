"""Formulários"""

from typing import List, Optional
from fasthtml.common import *
from database.models import ChamberOption, UserRole
from web.validation import UserFormData, EMAIL_TAKEN_ERROR
from .cards import alert
from .modals import modal, MODAL_CONTAINER_ID

USER_FORM_ID = "user-form"
EMAIL_FEEDBACK_ID = "email-feedback"
FORM_FEEDBACK_ID = "user-form-feedback"
SUBMIT_BUTTON_ID = "user-form-submit"
CHAMBER_FIELD_ID = "chamber-field"
CLOSE_URL = "/admin/usuarios/fechar"

# Mostra/esconde o seletor de câmara conforme o tipo escolhido
_TOGGLE_CHAMBER_JS = (
    f"document.getElementById('{CHAMBER_FIELD_ID}')"
    f".classList.toggle('hidden', this.value !== '{UserRole.CAMARA_ADMIN.value}')"
)


def email_feedback(taken: bool, oob: bool = False) -> Div:
    """Aviso de email já usado, atualizado enquanto o usuário digita"""
    attrs = {"hx_swap_oob": "true"} if oob else {}
    return Div(
        P(EMAIL_TAKEN_ERROR, cls="text-error text-xs mt-1") if taken else None,
        id=EMAIL_FEEDBACK_ID,
        **attrs
    )


def submit_button(disabled: bool = False, oob: bool = False) -> Button:
    """Botão Salvar (desabilitado enquanto o email colidir)"""
    attrs = {"hx_swap_oob": "true"} if oob else {}
    return Button(
        "Salvar",
        Span(cls="loading loading-spinner loading-sm htmx-indicator"),
        type="submit",
        id=SUBMIT_BUTTON_ID,
        disabled=disabled,
        cls="btn btn-primary",
        **attrs
    )


def form_feedback(error: Optional[str] = None, success: Optional[str] = None, close_delay: int = 2) -> Div:
    """Área de mensagens do formulário

    No sucesso agenda o fechamento do modal; se o modal for fechado antes,
    o elemento some junto e o fechamento agendado não acontece.
    """
    if success:
        return Div(
            alert(success, "success"),
            Div(
                hx_get=CLOSE_URL,
                hx_trigger=f"load delay:{close_delay}s",
                hx_target=f"#{MODAL_CONTAINER_ID}",
            ),
            id=FORM_FEEDBACK_ID
        )

    return Div(
        alert(error, "error") if error else None,
        id=FORM_FEEDBACK_ID
    )


def chamber_select(form: UserFormData, chambers: List[ChamberOption]) -> Div:
    """Seletor de câmara (visível apenas para camaraAdmin)"""
    hidden = "" if form.role == UserRole.CAMARA_ADMIN.value else " hidden"
    return Div(
        Label("Câmara", fr="chamber_id", cls="label"),
        Select(
            Option("Selecione uma câmara", value="", selected=not form.chamber_id),
            *[
                Option(chamber.name, value=chamber.id, selected=chamber.id == form.chamber_id)
                for chamber in chambers
            ],
            name="chamber_id",
            id="chamber_id",
            cls="select select-bordered w-full"
        ),
        id=CHAMBER_FIELD_ID,
        cls=f"form-control mb-4{hidden}"
    )


def user_form_modal(
    form: UserFormData,
    chambers: List[ChamberOption],
    error: Optional[str] = None,
    email_taken: bool = False,
) -> Div:
    """Modal de criação/edição de usuário

    Args:
        form: Valores iniciais do formulário
        chambers: Opções do seletor de câmara
        error: Erro inicial (ex.: falha ao carregar as câmaras)
        email_taken: O email atual já pertence a outro usuário
    """
    title = "Adicionar Usuário" if form.is_new else "Editar Usuário"
    target = f"#{MODAL_CONTAINER_ID}"

    password_label = Label(
        "Senha",
        Span(" (deixe em branco para manter a atual)", cls="text-xs text-base-content/60") if not form.is_new else None,
        fr="password",
        cls="label"
    )

    return modal(
        # Cabeçalho
        Div(
            H3(title, cls="font-bold text-lg"),
            Button(
                "✕",
                type="button",
                cls="btn btn-sm btn-circle btn-ghost absolute right-0 top-0",
                hx_get=CLOSE_URL,
                hx_target=target,
            ),
            cls="relative mb-4"
        ),

        form_feedback(error=error),

        Form(
            Input(type="hidden", name="user_id", value=form.user_id),

            # Nome
            Div(
                Label("Nome", fr="name", cls="label"),
                Input(
                    type="text",
                    name="name",
                    id="name",
                    value=form.name,
                    required=True,
                    cls="input input-bordered w-full"
                ),
                cls="form-control mb-4"
            ),

            # Email (verificado enquanto digita)
            Div(
                Label("Email", fr="email", cls="label"),
                Input(
                    type="email",
                    name="email",
                    id="email",
                    value=form.email,
                    required=True,
                    cls=f"input input-bordered w-full{' input-error' if email_taken else ''}",
                    hx_post="/admin/usuarios/verificar-email",
                    hx_trigger="input changed delay:300ms",
                    hx_target=f"#{EMAIL_FEEDBACK_ID}",
                    hx_swap="outerHTML",
                    hx_include=f"#{USER_FORM_ID} [name='user_id']",
                ),
                email_feedback(email_taken),
                cls="form-control mb-4"
            ),

            # Senha
            Div(
                password_label,
                Input(
                    type="password",
                    name="password",
                    id="password",
                    value=form.password,
                    required=form.is_new,
                    autocomplete="new-password",
                    cls="input input-bordered w-full"
                ),
                cls="form-control mb-4"
            ),

            # Tipo de usuário
            Div(
                Label("Tipo de Usuário", fr="role", cls="label"),
                Select(
                    Option("Administrador", value=UserRole.ADMIN.value, selected=form.role == UserRole.ADMIN.value),
                    Option(
                        "Administrador de Câmara",
                        value=UserRole.CAMARA_ADMIN.value,
                        selected=form.role == UserRole.CAMARA_ADMIN.value
                    ),
                    name="role",
                    id="role",
                    onchange=_TOGGLE_CHAMBER_JS,
                    cls="select select-bordered w-full"
                ),
                cls="form-control mb-4"
            ),

            chamber_select(form, chambers),

            # Ativo
            Div(
                Label(
                    Input(
                        type="checkbox",
                        name="active",
                        value="true",
                        checked=form.active,
                        cls="checkbox checkbox-primary"
                    ),
                    Span("Usuário ativo", cls="label-text ml-3"),
                    cls="label cursor-pointer justify-start"
                ),
                cls="form-control mb-4"
            ),

            # Botões
            Div(
                Button(
                    "Cancelar",
                    type="button",
                    cls="btn btn-ghost",
                    hx_get=CLOSE_URL,
                    hx_target=target,
                ),
                submit_button(disabled=email_taken),
                cls="modal-action"
            ),

            id=USER_FORM_ID,
            hx_post="/admin/usuarios/salvar",
            hx_target=f"#{FORM_FEEDBACK_ID}",
            hx_swap="outerHTML",
            hx_indicator=f"#{SUBMIT_BUTTON_ID}",
        ),
        modal_id="user-form-modal"
    )
