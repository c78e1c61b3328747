import pytest

from poetario.lista import Lista
from poetario.models import (
    Autor,
    Edicion,
    Editorial,
    Formacion,
    Libro,
    Sexo,
    TipoPoesia,
)


def test_tipo_poesia_menu_order():
    nombres = [
        "Decima",
        "Soneto",
        "Himno",
        "Haiku",
        "Romance",
        "Octava real",
        "Lira",
        "Verso libre",
    ]
    assert [TipoPoesia(nombre) for nombre in nombres] == list(TipoPoesia)


def test_sexo_values():
    assert [Sexo("Masculino"), Sexo("Femenino")] == list(Sexo)
    with pytest.raises(ValueError):
        Sexo("Otro")


def test_formacion_menu_order():
    nombres = [
        "Literatura",
        "Artes",
        "Ciencias sociales",
        "Ingenierias",
        "Areas de la salud",
        "Jurisprudencia",
    ]
    assert [Formacion(nombre) for nombre in nombres] == list(Formacion)
    with pytest.raises(ValueError):
        Formacion("Otros")


def test_enum_members_compare_as_strings():
    assert TipoPoesia.OCTAVA_REAL == "Octava real"
    assert TipoPoesia("Haiku") is TipoPoesia.HAIKU


def test_edicion_fields():
    edicion = Edicion("2a", 1999, 7, "Bogota")
    assert edicion.numero_edicion == "2a"
    assert edicion.fecha_publicacion == 1999
    assert edicion.id_editorial == 7
    assert edicion.ciudad_publicacion == "Bogota"


def test_autor_keyword_construction():
    autor = Autor(id_autor=3, nombre="Ana", sexo=Sexo.FEMENINO.value)
    assert autor.id_autor == 3
    assert autor.nombre == "Ana"
    assert autor.sexo == "Femenino"
    assert autor.apellido == ""


def test_editorial_equality():
    a = Editorial(1, "Norma", "Cali", "Colombia")
    b = Editorial(1, "Norma", "Cali", "Colombia")
    assert a == b


def test_libro_default_ediciones_independent():
    uno = Libro(nombre="Uno")
    dos = Libro(nombre="Dos")
    uno.ediciones.insertar_final(Edicion("1"))
    assert len(uno.ediciones) == 1
    assert dos.ediciones.lista_vacia()


def test_libro_holds_editions_in_order():
    ediciones = Lista([Edicion("1"), Edicion("2")])
    libro = Libro("Versos", TipoPoesia.LIRA.value, 4, ediciones)
    assert [e.numero_edicion for e in libro.ediciones] == ["1", "2"]
    assert libro.tipo_poesia == "Lira"
    assert libro == Libro("Versos", "Lira", 4, Lista([Edicion("1"), Edicion("2")]))