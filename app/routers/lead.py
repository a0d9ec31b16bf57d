"""
Route de capture des demandes client
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.dependencies import get_lead_mailer
from app.models.lead import LeadSubmission, LeadResponse
from core.errors import MailDeliveryError
from core.lead_document import render_lead_pdf
from core.mailer import LeadMailer


router = APIRouter(tags=["Lead"], prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/lead", response_model=LeadResponse, response_model_exclude_none=True)
async def capture_lead(
    lead: LeadSubmission,
    mailer: LeadMailer = Depends(get_lead_mailer)
):
    """
    Rend la demande en PDF puis l'envoie par email

    Args:
        lead: Nom, email et message du client
        mailer: Client SMTP

    Returns:
        LeadResponse: succès une fois le message accepté par le relais,
        échec avec statut 500 sinon
    """
    try:
        pdf_content = render_lead_pdf(lead.name, lead.email, lead.message)

        # smtplib est bloquant
        await run_in_threadpool(
            mailer.send_lead,
            lead.name,
            lead.email,
            lead.message,
            pdf_content,
        )

        return LeadResponse(success=True, message="PDF sent to your email!")

    except MailDeliveryError as e:
        logger.error("Email Error: %s", e.message)
        return JSONResponse(
            {"success": False, "message": "Email sending failed", "error": e.message},
            status_code=500
        )

    except Exception as e:
        logger.error("Error capturing lead: %s", e, exc_info=True)
        return JSONResponse(
            {"success": False, "message": "Email sending failed", "error": str(e)},
            status_code=500
        )
