import pytest

from poetario.lista import Lista


def test_new_list_is_empty():
    lista = Lista()
    assert lista.lista_vacia()
    assert len(lista) == 0


def test_init_from_items():
    lista = Lista(["a", "b", "c"])
    assert list(lista) == ["a", "b", "c"]
    assert not lista.lista_vacia()


def test_insertar_final_keeps_order():
    lista = Lista()
    for item in ["x", "y", "z"]:
        lista.insertar_final(item)
    assert list(lista) == ["x", "y", "z"]
    assert len(lista) == 3


def test_insertar_inicio_puts_first():
    lista = Lista(["b"])
    lista.insertar_inicio("a")
    assert lista.buscar_pos(1) == "a"
    assert lista.buscar_pos(2) == "b"


def test_insertar_pos_middle_and_end():
    lista = Lista(["a", "c"])
    lista.insertar_pos("b", 2)
    lista.insertar_pos("d", 4)
    assert list(lista) == ["a", "b", "c", "d"]


@pytest.mark.parametrize("pos", [0, -1, 3])
def test_insertar_pos_invalid(pos):
    lista = Lista(["a"])
    with pytest.raises(IndexError):
        lista.insertar_pos("z", pos)
    assert list(lista) == ["a"]


def test_borrar_pos_returns_and_removes():
    lista = Lista(["a", "b", "c"])
    assert lista.borrar_pos(2) == "b"
    assert list(lista) == ["a", "c"]


@pytest.mark.parametrize("pos", [0, 2, 5])
def test_borrar_pos_invalid(pos):
    lista = Lista(["a"])
    with pytest.raises(IndexError):
        lista.borrar_pos(pos)
    assert len(lista) == 1


def test_borrar_pos_empty_list():
    with pytest.raises(IndexError):
        Lista().borrar_pos(1)


def test_modificar_pos():
    lista = Lista(["a", "b"])
    lista.modificar_pos("B", 2)
    assert list(lista) == ["a", "B"]


def test_modificar_pos_invalid():
    lista = Lista(["a"])
    with pytest.raises(IndexError):
        lista.modificar_pos("q", 2)
    assert list(lista) == ["a"]


def test_buscar_pos_every_position():
    items = ["p", "q", "r"]
    lista = Lista(items)
    assert [lista.buscar_pos(pos) for pos in range(1, len(lista) + 1)] == items


def test_buscar_pos_error_message():
    with pytest.raises(IndexError, match="Posicion invalida"):
        Lista().buscar_pos(1)


def test_drain_by_first_position():
    lista = Lista([1, 2, 3])
    drained = []
    while not lista.lista_vacia():
        drained.append(lista.borrar_pos(1))
    assert drained == [1, 2, 3]
    assert len(lista) == 0


def test_equality():
    assert Lista([1, 2]) == Lista([1, 2])
    assert not (Lista([1, 2]) == Lista([2, 1]))