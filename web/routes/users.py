"""Rotas de gerenciamento de usuários"""

import logging
from fasthtml.common import *
from database import UserStore, ChamberStore
from web.config import WebConfig
from web.components import (
    page_layout, user_table, user_form_modal, email_feedback, submit_button,
    form_feedback, flash_message, confirm_delete_modal, MODAL_CONTAINER_ID
)
from web.validation import UserFormData, is_email_taken, validate_user_form

logger = logging.getLogger(__name__)

LOAD_ERROR = "Erro ao carregar usuários. Tente novamente."
NOT_FOUND_ERROR = "Usuário não encontrado."
CHAMBERS_ERROR = "Erro ao carregar câmaras. Tente novamente."
SAVE_ERROR = "Erro ao salvar usuário. Tente novamente."
UPDATE_ERROR = "Erro ao atualizar usuário. Tente novamente."
DELETE_ERROR = "Erro ao excluir usuário. Tente novamente."
DELETE_SUCCESS = "Usuário excluído com sucesso!"


def setup_user_routes(app, config: WebConfig, users: UserStore, chambers: ChamberStore):
    """Configura as rotas de gerenciamento de usuários

    Args:
        app: Aplicação FastHTML
        config: Configuração da aplicação web
        users: Store de usuários
        chambers: Store de câmaras (opções do seletor)
    """

    def flash(text: str, kind: str = "success") -> Div:
        return flash_message(text, kind, timeout=config.message_timeout, oob=True)

    async def load_chamber_options():
        """Opções do seletor de câmara; em caso de falha, lista vazia e mensagem"""
        try:
            return await chambers.list_options(), None
        except Exception as e:
            logger.error(f"Erro ao carregar câmaras: {e}")
            return [], CHAMBERS_ERROR

    async def reload_table():
        """Tabela atualizada (out-of-band) ou mensagem de erro"""
        try:
            return user_table(await users.list_users(), oob=True)
        except Exception as e:
            logger.error(f"Erro ao carregar usuários: {e}")
            return flash(LOAD_ERROR, "error")

    @app.get("/admin/usuarios")
    async def users_list_page():
        """Lista de todos os usuários"""
        message = None
        try:
            all_users = await users.list_users()
        except Exception as e:
            logger.error(f"Erro ao carregar usuários: {e}")
            all_users = []
            message = flash_message(LOAD_ERROR, "error", timeout=config.message_timeout)

        options, _ = await load_chamber_options()

        content = Div(
            Div(
                H1("Gerenciamento de Usuários", cls="text-3xl font-bold"),
                Button(
                    "+ Adicionar Usuário",
                    type="button",
                    cls="btn btn-primary",
                    hx_get="/admin/usuarios/novo",
                    hx_target=f"#{MODAL_CONTAINER_ID}",
                ),
                cls="flex justify-between items-center mb-6"
            ),

            Div(
                Div(
                    user_table(all_users),
                    cls="card-body p-0"
                ),
                cls="card bg-base-100 shadow-xl"
            )
        )

        return page_layout("Gerenciamento de Usuários", content, options, flash=message)

    @app.get("/admin/usuarios/tabela")
    async def users_table_fragment():
        """Recarrega a tabela de usuários"""
        return await reload_table()

    @app.get("/admin/usuarios/novo")
    async def user_create_modal():
        """Modal de criação com os valores padrão"""
        options, error = await load_chamber_options()
        return user_form_modal(UserFormData(), options, error=error)

    @app.get("/admin/usuarios/{user_id}/editar")
    async def user_edit_modal(user_id: str):
        """Modal de edição preenchido com os dados do usuário"""
        try:
            user = await users.get_user_by_id(user_id)
        except Exception as e:
            logger.error(f"Erro ao carregar usuário #{user_id}: {e}")
            return flash(LOAD_ERROR, "error")

        if not user:
            return flash(NOT_FOUND_ERROR, "error")

        options, error = await load_chamber_options()
        return user_form_modal(UserFormData.from_user(user), options, error=error)

    @app.post("/admin/usuarios/verificar-email")
    async def user_email_check(email: str = "", user_id: str = ""):
        """Verifica, enquanto o usuário digita, se o email já está em uso"""
        try:
            taken = is_email_taken(await users.list_users(), email.strip(), user_id or None)
        except Exception as e:
            logger.error(f"Erro ao verificar email: {e}")
            taken = False

        return email_feedback(taken), submit_button(disabled=taken, oob=True)

    @app.post("/admin/usuarios/salvar")
    async def user_save(
        user_id: str = "",
        name: str = "",
        email: str = "",
        role: str = "admin",
        chamber_id: str = "",
        active: str = "",
        password: str = "",
    ):
        """Cria ou atualiza o usuário conforme a presença do ID"""
        form = UserFormData(
            user_id=user_id.strip(),
            name=name.strip(),
            email=email.strip(),
            role=role,
            chamber_id=chamber_id,
            active=active == "true",
            password=password,
        )

        try:
            all_users = await users.list_users()
        except Exception as e:
            logger.error(f"Erro ao carregar usuários para validação: {e}")
            return form_feedback(error=SAVE_ERROR)

        error = validate_user_form(form, all_users)
        if error:
            return form_feedback(error=error)

        try:
            if form.is_new:
                user = await users.add_user(**form.to_fields())
                logger.info(f"Usuário #{user.id} criado pelo painel")
                success = "Usuário adicionado com sucesso!"
            else:
                user = await users.update_user(form.user_id, **form.to_fields())
                if not user:
                    return form_feedback(error=UPDATE_ERROR)
                logger.info(f"Usuário #{user.id} atualizado pelo painel")
                success = "Usuário atualizado com sucesso!"
        except Exception as e:
            logger.error(f"Erro ao salvar usuário: {e}")
            return form_feedback(error=SAVE_ERROR)

        return (
            form_feedback(success=success, close_delay=config.close_delay),
            submit_button(disabled=True, oob=True),
        )

    @app.get("/admin/usuarios/fechar")
    async def user_modal_close():
        """Fecha o modal aberto e recarrega a lista"""
        return "", await reload_table()

    @app.get("/admin/usuarios/{user_id}/excluir")
    async def user_delete_modal(user_id: str):
        """Modal de confirmação de exclusão"""
        try:
            user = await users.get_user_by_id(user_id)
        except Exception as e:
            logger.error(f"Erro ao carregar usuário #{user_id}: {e}")
            return flash(LOAD_ERROR, "error")

        if not user:
            return flash(NOT_FOUND_ERROR, "error")

        return confirm_delete_modal(
            title="Excluir Usuário",
            message=f'Tem certeza que deseja excluir o usuário "{user.name}"? Esta ação não pode ser desfeita.',
            confirm_url=f"/admin/usuarios/{user.id}/excluir",
            cancel_url="/admin/usuarios/fechar",
        )

    @app.post("/admin/usuarios/{user_id}/excluir")
    async def user_delete(user_id: str):
        """Exclui o usuário; o modal é fechado em qualquer caso"""
        try:
            if await users.delete_user(user_id):
                logger.info(f"Usuário #{user_id} excluído pelo painel")
                message = flash(DELETE_SUCCESS)
            else:
                message = flash(DELETE_ERROR, "error")
        except Exception as e:
            logger.error(f"Erro ao excluir usuário #{user_id}: {e}")
            message = flash(DELETE_ERROR, "error")

        return "", await reload_table(), message

    @app.get("/admin/usuarios/mensagem/limpar")
    def user_message_clear():
        """Remove a mensagem de feedback (chamado pelo timer do próprio elemento)"""
        return flash_message()
