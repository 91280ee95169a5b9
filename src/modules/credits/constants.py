"""Credit domain constants."""

from django.db import models


class CreditStatus(models.TextChoices):
    IN_PROGRESS = "IN_PROGRESS", "Em análise"
    APPROVED = "APPROVED", "Aprovado"
    REJECT = "REJECT", "Rejeitado"


INITIAL_STATUS = CreditStatus.IN_PROGRESS
