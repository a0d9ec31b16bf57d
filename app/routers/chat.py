"""
Route du chatbot FAQ
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_resolver_chain
from app.models.chat import ChatMessage, ChatResponse
from core.errors import CompletionError
from core.resolvers import ResolverChain


router = APIRouter(tags=["Chat"], prefix="/api")
logger = logging.getLogger(__name__)

CHAT_ERROR_ANSWER = "Sorry, something went wrong."


@router.post("/chat", response_model=ChatResponse)
async def chat(
    chat_message: ChatMessage,
    chain: ResolverChain = Depends(get_resolver_chain)
):
    """
    Répond à un message : FAQ exacte, FAQ approchée, puis API de complétion

    Args:
        chat_message: Message de l'utilisateur
        chain: Chaîne de résolution partagée

    Returns:
        ChatResponse: {"answer": ...}, statut 500 si le repli échoue
    """
    try:
        answer = await chain.resolve(chat_message.message)
        return ChatResponse(answer=answer)

    except CompletionError as e:
        logger.error("Completion fallback failed: %s", e.message)
        return JSONResponse({"answer": CHAT_ERROR_ANSWER}, status_code=500)

    except Exception as e:
        logger.error("Error in chat: %s", e, exc_info=True)
        return JSONResponse({"answer": CHAT_ERROR_ANSWER}, status_code=500)
