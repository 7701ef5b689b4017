"""Page objects for the CloudQA practice form."""

from .cloudqa_form_page import CloudQAFormPage

__all__ = [
    "CloudQAFormPage",
]
