"""Modais"""

from fasthtml.common import *

MODAL_CONTAINER_ID = "modal-container"


def modal_container(*content) -> Div:
    """Container onde os modais são carregados via htmx"""
    return Div(*content, id=MODAL_CONTAINER_ID)


def modal(*content, modal_id: str, wide: bool = False) -> Div:
    """Modal aberto (sobreposto à página)"""
    return Div(
        Div(
            *content,
            cls=f"modal-box {'max-w-2xl' if wide else 'max-w-md'} max-h-[90vh] overflow-y-auto"
        ),
        id=modal_id,
        cls="modal modal-open"
    )


def confirm_delete_modal(title: str, message: str, confirm_url: str, cancel_url: str) -> Div:
    """Modal genérico de confirmação de exclusão

    Não guarda estado: o que acontece ao confirmar ou cancelar é definido
    por quem chama, através das URLs.

    Args:
        title: Título do modal
        message: Mensagem de confirmação
        confirm_url: POST executado ao confirmar
        cancel_url: GET executado ao cancelar
    """
    target = f"#{MODAL_CONTAINER_ID}"
    return modal(
        H3(title, cls="font-bold text-lg mb-4"),
        P(message, cls="text-base-content/70 mb-6"),
        Div(
            Button(
                "Cancelar",
                type="button",
                cls="btn btn-ghost",
                hx_get=cancel_url,
                hx_target=target,
            ),
            Button(
                "Excluir",
                type="button",
                cls="btn btn-error",
                hx_post=confirm_url,
                hx_target=target,
            ),
            cls="modal-action"
        ),
        modal_id="confirm-delete-modal"
    )
