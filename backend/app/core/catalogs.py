"""
Closed reference lists for profile choice fields.

These tuples are the only definition of the valid department and
academic level values; the validator and the ``/api/auth/lists``
endpoint both read them from here.
"""

DEPARTMENTS: tuple[str, ...] = (
    "AMAZONAS",
    "ANTIOQUIA",
    "ARAUCA",
    "ATLANTICO",
    "BOLIVAR",
    "BOYACA",
    "CALDAS",
    "CAQUETA",
    "CAUCA",
    "CASANARE",
    "CESAR",
    "CHOCO",
    "CUNDINAMARCA",
    "CORDOBA",
    "GUAINIA",
    "GUAVIARE",
    "HUILA",
    "LA GUAJIRA",
    "MAGDALENA",
    "META",
    "NARIÑO",
    "NORTE DE SANTANDER",
    "PUTUMAYO",
    "QUINDIO",
    "RISARALDA",
    "SANTAFE DE BOGOTA DC",
    "SANTANDER",
    "SUCRE",
    "TOLIMA",
    "VALLE DEL CAUCA",
    "VAUPES",
    "VICHADA",
    "ARCHIPIELAGO DE SAN ANDRES PROVIDENCIA Y SANTA CATALINA",
    "OTRO",
)

ACADEMIC_LEVELS: tuple[str, ...] = (
    "Bachiller",
    "Técnico",
    "Tecnólogo",
    "Pregrado",
    "Profesional",
    "Especialización",
    "Maestría",
    "Doctorado",
    "Postdoctorado",
    "Otro",
)


def get_catalogs() -> dict[str, list[str]]:
    """Return both lists as plain JSON-friendly lists."""
    return {
        "departments": list(DEPARTMENTS),
        "academic_levels": list(ACADEMIC_LEVELS),
    }
