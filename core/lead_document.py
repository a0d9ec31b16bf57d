"""
Génération du PDF de demande client
"""
import logging

from fpdf import FPDF
from fpdf.enums import XPos, YPos


logger = logging.getLogger(__name__)

DOCUMENT_TITLE = "Client Requirement"
ATTACHMENT_FILENAME = "client-requirement.pdf"


def _latin1(text: str) -> str:
    """Les polices de base ne couvrent que latin-1"""
    return (text or "").encode("latin-1", "replace").decode("latin-1")


def render_lead_pdf(name: str, email: str, message: str) -> bytes:
    """
    Rend la demande dans un PDF entièrement en mémoire.

    Args:
        name: Nom du client
        email: Email du client
        message: Besoin exprimé (texte libre, peut s'étendre sur plusieurs pages)

    Returns:
        bytes: Contenu du PDF
    """
    pdf = FPDF(format="A4")
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    # Titre
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 12, DOCUMENT_TITLE, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(6)

    # Champs
    pdf.set_font("Helvetica", "", 14)
    pdf.cell(0, 8, _latin1(f"Name: {name}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.cell(0, 8, _latin1(f"Email: {email}"), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(6)

    # Corps
    pdf.cell(0, 8, "Message/Requirements:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.multi_cell(0, 8, _latin1(message))

    content = bytes(pdf.output())
    logger.info("Lead PDF rendered (%d pages, %d bytes)", pdf.page_no(), len(content))
    return content
