from .contact_details import ContactDetails
from .grc_no import GrcNo
from .visit_stats import VisitStats

__all__ = ["ContactDetails", "GrcNo", "VisitStats"]
