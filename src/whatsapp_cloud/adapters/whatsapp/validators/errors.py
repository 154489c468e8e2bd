"""Erros de validação de entrada das operações WhatsApp."""


class ValidationError(ValueError):
    """Entrada inválida detectada antes do envio.

    Contém mensagem descritiva do erro de validação.
    """

    pass
