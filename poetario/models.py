"""Records kept by the catalogue: editions, authors, publishers and books."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from poetario.lista import Lista


class TipoPoesia(str, Enum):
    """Kinds of poetry a book may hold, in menu order."""

    DECIMA = "Decima"
    SONETO = "Soneto"
    HIMNO = "Himno"
    HAIKU = "Haiku"
    ROMANCE = "Romance"
    OCTAVA_REAL = "Octava real"
    LIRA = "Lira"
    VERSO_LIBRE = "Verso libre"


class Sexo(str, Enum):
    """Sex of an author, in menu order."""

    MASCULINO = "Masculino"
    FEMENINO = "Femenino"


class Formacion(str, Enum):
    """Predefined educational backgrounds, in menu order."""

    LITERATURA = "Literatura"
    ARTES = "Artes"
    CIENCIAS_SOCIALES = "Ciencias sociales"
    INGENIERIAS = "Ingenierias"
    AREAS_DE_LA_SALUD = "Areas de la salud"
    JURISPRUDENCIA = "Jurisprudencia"


@dataclass
class Edicion:
    """One edition of a book."""

    numero_edicion: str = ""
    fecha_publicacion: int = 0
    id_editorial: int = 0
    ciudad_publicacion: str = ""


@dataclass
class Autor:
    """A poet."""

    id_autor: int = 0
    nombre: str = ""
    apellido: str = ""
    sexo: str = ""
    fecha_nacimiento: int = 0
    ciudad_nacimiento: str = ""
    pais_nacimiento: str = ""
    ciudad_residencia: str = ""
    formacion_base: str = ""
    anio_inicio_literatura: int = 0
    anio_publicacion_primera_obra: int = 0


@dataclass
class Editorial:
    """A publishing house."""

    id_editorial: int = 0
    nombre_editorial: str = ""
    ciudad_oficina_p: str = ""
    pais_oficina_p: str = ""


@dataclass
class Libro:
    """A book of poetry with its editions."""

    nombre: str = ""
    tipo_poesia: str = ""
    id_autor: int = 0
    ediciones: Lista[Edicion] = field(default_factory=Lista)