"""Custom exceptions for the templating context."""


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a gallery template id is unknown.

    Attributes:
        template_id: The id that was requested
        available: Ids the gallery does provide
    """

    def __init__(self, template_id: str, available=()):
        self.template_id = template_id
        self.available = tuple(available)
        message = f"Unknown template '{template_id}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]
