"""Errores del núcleo de rastreo."""


class PersonNotFoundError(LookupError):
    """La consulta nombra a una persona que nunca fue ingerida."""

    def __init__(self, person: str):
        super().__init__(f"Persona no encontrada: {person}")
        self.person = person
