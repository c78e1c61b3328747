"""Interactive menus for managing books, authors and publishers of poetry."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO, TypeVar

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

T = TypeVar("T")

_INVALIDA = "Opcion invalida, intenta de nuevo."
_NUMERO_INVALIDO = "Numero invalido, intenta de nuevo."
_VACIA = "No hay elementos registrados."
_MODIFICAR = "Que informacion desea modificar?"

_MENU_PRINCIPAL = (
    "Que desea realizar?\n"
    "1) Numero total de obras de un autor\n"
    "2) Listado de los nombres de las obras de un autor\n"
    "3) Autores a los cuales les ha publicado una editorial\n"
    "4) Cantidad de editoriales que le han publicado a un numero de poetas\n"
    "5) Obtener el numero de hombres y mujeres a los cuales les ha publicado una editorial\n"
    "6) Mostrar lista de autores en rango de edad\n"
    "7) Mostrar listado de autores por tipo de poesia y editorial\n"
    "8) Agregar libro\n"
    "9) Eliminar libro\n"
    "10) Modificar libro\n"
    "11) Agregar autor\n"
    "12) Eliminar autor\n"
    "13) Modificar autor\n"
    "14) Agregar editorial\n"
    "15) Eliminar editorial\n"
    "16) Modificar editorial\n"
    "0) Salir"
)

_MENU_LIBRO = (
    f"{_MODIFICAR}\n"
    "1) Nombre \n2) Tipo \n3) IdAutor \n4) Listado de las ediciones \n0) Volver"
)

_MENU_TIPO = (
    "Cual tipo de poesia desea?\n"
    "1) Decima \n2) Soneto \n3) Himno\n"
    "4) Haiku \n5) Romance \n6) Octava real\n"
    "7) Lira \n8) Verso libre \n0) Volver "
)

_MENU_AUTOR = (
    f"{_MODIFICAR}\n"
    "1) Id \n2) Nombre \n3) Apellido\n"
    "4) Sexo \n5) Fecha de nacimiento \n6) Ciudad de nacimiento\n"
    "7) Pais de nacimiento \n8) Ciudad de residencia \n9) Formacion base\n"
    "10) Anio de inicio en la literatura \n11) Anio de publicacion de la primera obra\n"
    "0) Volver"
)

_MENU_EDITORIAL = (
    f"{_MODIFICAR}\n"
    "1) Id de la editorial \n2) Nombre de la editorial\n"
    "3) Ciudad de la oficina principal \n4) Pais de la oficina principal\n"
    "0) Volver"
)

_MENU_EDICION = (
    f"{_MODIFICAR}\n"
    "1) Numero de la edicion \n2) Fecha de publicacion\n"
    "3) Id de la editorial \n4) Ciudad de publicacion\n"
    "0) Volver"
)

_MENU_LISTADO_EDICIONES = (
    "Que operacion desea hacerle al listado de ediciones\n"
    "1) Insetar nueva edicion \n2) Eliminar edicion \n"
    "3) Modificar edicion \n0) Volver "
)

_MENU_SEXO = "Seleccione el sexo del autor\n1) Masculino \n2) Femenino "
_MENU_SEXO_MOD = _MENU_SEXO + "\n0) Volver "

_MENU_FORMACION = (
    "Seleccione la formacion base del autor\n"
    "1) Literatura \n2) Artes \n3) Ciencias sociales \n"
    "4) Ingenierias \n5) Areas de la salud \n6) Jurisprudencia\n"
    "7) Otros "
)
_MENU_FORMACION_MOD = _MENU_FORMACION + "\n0) Volver "
_PREGUNTA_FORMACION = "Escriba cual es la formacion base"

_CAMPOS_AUTOR: dict[int, tuple[str, str, type]] = {
    1: ("Escriba el nuevo Id", "id_autor", int),
    2: ("Escriba el nombre del autor", "nombre", str),
    3: ("Escriba el apellido del autor", "apellido", str),
    5: ("Digite la fecha de nacimiento", "fecha_nacimiento", int),
    6: ("Escriba la ciudad de nacimiento", "ciudad_nacimiento", str),
    7: ("Escriba el pais de nacimiento", "pais_nacimiento", str),
    8: ("Escriba la ciudad de residencia", "ciudad_residencia", str),
    10: ("Digite el anio de inicio en la literatura", "anio_inicio_literatura", int),
    11: (
        "Digite el anio de publicacion de la primera obra",
        "anio_publicacion_primera_obra",
        int,
    ),
}

_CAMPOS_EDITORIAL: dict[int, tuple[str, str, type]] = {
    1: ("Digite la nueva id", "id_editorial", int),
    2: ("Escriba el nombre de la editorial", "nombre_editorial", str),
    3: ("Escriba la ciudad de la oficina principal", "ciudad_oficina_p", str),
    4: ("Escriba el pais de la oficina principal", "pais_oficina_p", str),
}

_CAMPOS_EDICION: dict[int, tuple[str, str, type]] = {
    1: ("Ingrese el numero de la edicion", "numero_edicion", str),
    2: ("Ingrese la fecha de publicacion", "fecha_publicacion", int),
    4: ("Ingrese ciudad de publicacion", "ciudad_publicacion", str),
}

# Main-menu queries that have no behaviour yet; choosing them returns to the menu.
_OPCIONES_SIN_ACCION = frozenset({1, 2, 3, 4, 5, 6, 7, 9, 12, 15})


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class Control:
    """Menu-driven session over a catalogue of books, authors and publishers."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._out = stdout if stdout is not None else sys.stdout
        self._entrada = _tokens(stdin if stdin is not None else sys.stdin)
        self.libros: Lista[Libro] = Lista()
        self.autores: Lista[Autor] = Lista()
        self.editoriales: Lista[Editorial] = Lista()
        self._libro: Libro | None = None
        self._autor: Autor | None = None
        self._editorial: Editorial | None = None
        self._edicion: Edicion | None = None

    # -- input and output -------------------------------------------------

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def _leer_texto(self) -> str:
        try:
            return next(self._entrada)
        except StopIteration:
            raise EOFError("fin de la entrada") from None

    def _leer_opcion(self) -> int | None:
        token = self._leer_texto()
        try:
            return int(token)
        except ValueError:
            return None

    def _leer_entero(self) -> int:
        while (valor := self._leer_opcion()) is None:
            self._say(_NUMERO_INVALIDO)
        return valor

    def _preguntar_texto(self, prompt: str) -> str:
        self._say(prompt)
        return self._leer_texto()

    def _preguntar_entero(self, prompt: str) -> int:
        self._say(prompt)
        return self._leer_entero()

    def _editar_campo(self, registro: Any, prompt: str, campo: str, tipo: type) -> None:
        if tipo is int:
            valor: Any = self._preguntar_entero(prompt)
        else:
            valor = self._preguntar_texto(prompt)
        setattr(registro, campo, valor)

    def _escoger(self, lista: Lista[T], imprimir: Callable[[Lista[T]], None]) -> int | None:
        """Show ``lista`` and read a valid 1-based position, or None if it is empty."""
        if lista.lista_vacia():
            self._say(_VACIA)
            return None
        while True:
            imprimir(lista)
            opcion = self._leer_opcion()
            if opcion is not None and 1 <= opcion <= len(lista):
                return opcion
            self._say(_INVALIDA)

    # -- main menu ----------------------------------------------------------

    def menu_principal(self) -> None:
        """Run the main menu until the user leaves or input runs out."""
        acciones: dict[int, Callable[[], object]] = {
            8: self.menu_agregar_libro,
            10: self.menu_escoger_libro,
            11: self.menu_agregar_autor,
            13: self.menu_escoger_autor_modificacion,
            14: self.menu_agregar_editorial,
            16: self.menu_escoger_editorial_modificacion,
        }
        try:
            while True:
                self._say(_MENU_PRINCIPAL)
                opcion = self._leer_opcion()
                if opcion == 0:
                    self._say("Saliendo...")
                    return
                if opcion in acciones:
                    acciones[opcion]()
                elif opcion not in _OPCIONES_SIN_ACCION:
                    self._say(_INVALIDA)
        except EOFError:
            return

    # -- books --------------------------------------------------------------

    def menu_agregar_libro(self) -> None:
        """Read a new book with its editions and append it to the catalogue."""
        libro = Libro(nombre=self._preguntar_texto("Digite el nombre del libro"))
        tipo = self.menu_tipo_poesia()
        if tipo is None:
            return
        libro.tipo_poesia = tipo
        id_autor = self.menu_escoger_autor_insercion()
        if id_autor is None:
            return
        libro.id_autor = id_autor
        self._libro = libro
        cantidad = self._preguntar_entero("Cuantas ediciones desea agregar?")
        for _ in range(cantidad):
            self.menu_agregar_edicion()
        self.libros.insertar_final(libro)
        self.imprimir_lista_libros(self.libros)
        self.imprimir_lista_autores(self.autores)
        self.imprimir_lista_editoriales(self.editoriales)

    def menu_modificar_libro(self) -> None:
        """Change one field of the selected book."""
        libro = self._libro
        if libro is None:
            return
        while True:
            self._say(_MENU_LIBRO)
            opcion = self._leer_opcion()
            if opcion == 0:
                return
            if opcion == 1:
                libro.nombre = self._preguntar_texto("Ingrese el nuevo nombre")
                return
            if opcion == 2:
                tipo = self.menu_tipo_poesia()
                if tipo is not None:
                    libro.tipo_poesia = tipo
                    return
                continue
            if opcion == 3:
                id_autor = self.menu_escoger_autor_insercion()
                if id_autor is not None:
                    libro.id_autor = id_autor
                return
            if opcion == 4:
                if self.menu_modificacion_listado_ediciones():
                    return
                continue
            self._say(_INVALIDA)

    def menu_tipo_poesia(self) -> str | None:
        """Ask for a kind of poetry; None when the user goes back."""
        tipos = list(TipoPoesia)
        while True:
            self._say(_MENU_TIPO)
            opcion = self._leer_opcion()
            if opcion == 0:
                return None
            if opcion is not None and 1 <= opcion <= len(tipos):
                return tipos[opcion - 1].value
            self._say(_INVALIDA)

    def menu_escoger_libro(self) -> None:
        """Select a book and open its modification menu."""
        self._say("Escoja el libro que desea modificar")
        pos = self._escoger(self.libros, self.imprimir_lista_libros)
        if pos is None:
            return
        self._libro = self.libros.buscar_pos(pos)
        self.menu_modificar_libro()

    # -- authors ------------------------------------------------------------

    def menu_agregar_autor(self) -> None:
        """Read a new author and append it to the catalogue."""
        autor = Autor()
        autor.id_autor = self._preguntar_entero("Digite el id del autor")
        autor.nombre = self._preguntar_texto("Escriba el nombre del autor")
        autor.apellido = self._preguntar_texto("Escriba el apellido del autor")
        autor.sexo = self.menu_seleccionar_sexo_autor_insercion()
        autor.fecha_nacimiento = self._preguntar_entero("Digite la fecha de nacimiento")
        autor.ciudad_nacimiento = self._preguntar_texto(
            "Escriba la ciudad de nacimiento del autor"
        )
        autor.pais_nacimiento = self._preguntar_texto("Escriba el pais de nacimiento del autor")
        autor.ciudad_residencia = self._preguntar_texto(
            "Escriba la ciudad de residencia del autor"
        )
        autor.formacion_base = self.menu_seleccionar_formacion_autor_insercion()
        autor.anio_inicio_literatura = self._preguntar_entero(
            "Digite el anio de inicio en la literatura"
        )
        autor.anio_publicacion_primera_obra = self._preguntar_entero(
            "Digite el anio de publicacion de la primera obra"
        )
        self._autor = autor
        self.autores.insertar_final(autor)

    def menu_modificar_autor(self) -> None:
        """Change one field of the selected author."""
        autor = self._autor
        if autor is None:
            return
        while True:
            self._say(_MENU_AUTOR)
            opcion = self._leer_opcion()
            if opcion == 0:
                return
            if opcion in _CAMPOS_AUTOR:
                self._editar_campo(autor, *_CAMPOS_AUTOR[opcion])
                return
            if opcion == 4:
                if self.menu_seleccionar_sexo_autor_modificacion():
                    return
                continue
            if opcion == 9:
                if self.menu_seleccionar_formacion_autor_modificacion():
                    return
                continue
            self._say(_INVALIDA)

    def menu_escoger_autor_insercion(self) -> int | None:
        """Select an author and return its id; None if there are none."""
        self._say("Escoja el autor")
        pos = self._escoger(self.autores, self.imprimir_lista_autores)
        if pos is None:
            return None
        self._autor = self.autores.buscar_pos(pos)
        return self._autor.id_autor

    def menu_escoger_autor_modificacion(self) -> int | None:
        """Select an author, modify it and return its id; None if there are none."""
        self._say("Escoja el autor")
        pos = self._escoger(self.autores, self.imprimir_lista_autores)
        if pos is None:
            return None
        self._autor = self.autores.buscar_pos(pos)
        self.menu_modificar_autor()
        return self._autor.id_autor

    def menu_seleccionar_sexo_autor_insercion(self) -> str:
        """Ask for the sex of a new author."""
        sexos = list(Sexo)
        while True:
            self._say(_MENU_SEXO)
            opcion = self._leer_opcion()
            if opcion is not None and 1 <= opcion <= len(sexos):
                return sexos[opcion - 1].value
            self._say(_INVALIDA)

    def menu_seleccionar_sexo_autor_modificacion(self) -> bool:
        """Change the selected author's sex; False when the user goes back."""
        sexos = list(Sexo)
        while True:
            self._say(_MENU_SEXO_MOD)
            opcion = self._leer_opcion()
            if opcion == 0:
                return False
            if opcion is not None and 1 <= opcion <= len(sexos):
                if self._autor is not None:
                    self._autor.sexo = sexos[opcion - 1].value
                return True
            self._say(_INVALIDA)

    def menu_seleccionar_formacion_autor_insercion(self) -> str:
        """Ask for the educational background of a new author."""
        formaciones = list(Formacion)
        while True:
            self._say(_MENU_FORMACION)
            opcion = self._leer_opcion()
            if opcion is not None and 1 <= opcion <= len(formaciones):
                return formaciones[opcion - 1].value
            if opcion == len(formaciones) + 1:
                return self._preguntar_texto(_PREGUNTA_FORMACION)
            self._say(_INVALIDA)

    def menu_seleccionar_formacion_autor_modificacion(self) -> bool:
        """Change the selected author's background; False when the user goes back."""
        formaciones = list(Formacion)
        while True:
            self._say(_MENU_FORMACION_MOD)
            opcion = self._leer_opcion()
            if opcion == 0:
                return False
            if opcion is not None and 1 <= opcion <= len(formaciones):
                valor = formaciones[opcion - 1].value
            elif opcion == len(formaciones) + 1:
                valor = self._preguntar_texto(_PREGUNTA_FORMACION)
            else:
                self._say(_INVALIDA)
                continue
            if self._autor is not None:
                self._autor.formacion_base = valor
            return True

    # -- publishers ---------------------------------------------------------

    def menu_agregar_editorial(self) -> None:
        """Read a new publisher and append it to the catalogue."""
        editorial = Editorial()
        editorial.id_editorial = self._preguntar_entero("Digite el id de la editorial")
        editorial.nombre_editorial = self._preguntar_texto("Escriba el nombre de la editorial")
        editorial.ciudad_oficina_p = self._preguntar_texto(
            "Escriba la ciudad de la oficina principal"
        )
        editorial.pais_oficina_p = self._preguntar_texto(
            "Escriba el pais de la oficina principal"
        )
        self._editorial = editorial
        self.editoriales.insertar_final(editorial)

    def menu_modificar_editorial(self) -> None:
        """Change one field of the selected publisher."""
        editorial = self._editorial
        if editorial is None:
            return
        while True:
            self._say(_MENU_EDITORIAL)
            opcion = self._leer_opcion()
            if opcion == 0:
                return
            if opcion in _CAMPOS_EDITORIAL:
                self._editar_campo(editorial, *_CAMPOS_EDITORIAL[opcion])
                return
            self._say(_INVALIDA)

    def menu_escoger_editorial_insercion(self) -> int | None:
        """Select a publisher and return its id; None if there are none."""
        self._say("Escoja la editorial")
        pos = self._escoger(self.editoriales, self.imprimir_lista_editoriales)
        if pos is None:
            return None
        self._editorial = self.editoriales.buscar_pos(pos)
        return self._editorial.id_editorial

    def menu_escoger_editorial_modificacion(self) -> None:
        """Select a publisher and open its modification menu."""
        self._say("Escoja la editorial")
        pos = self._escoger(self.editoriales, self.imprimir_lista_editoriales)
        if pos is None:
            return
        self._editorial = self.editoriales.buscar_pos(pos)
        self.menu_modificar_editorial()

    # -- editions -----------------------------------------------------------

    def menu_agregar_edicion(self) -> None:
        """Read a new edition and append it to the selected book."""
        if self._libro is None:
            return
        edicion = Edicion()
        edicion.numero_edicion = self._preguntar_texto("Ingrese el numero de la edicion")
        edicion.fecha_publicacion = self._preguntar_entero("Ingrese la fecha de publicacion")
        id_editorial = self.menu_escoger_editorial_insercion()
        if id_editorial is not None:
            edicion.id_editorial = id_editorial
        edicion.ciudad_publicacion = self._preguntar_texto("Ingrese ciudad de publicacion")
        self._edicion = edicion
        self._libro.ediciones.insertar_final(edicion)

    def menu_modificar_edicion(self) -> bool:
        """Change one field of the selected edition; False when the user goes back."""
        edicion = self._edicion
        if edicion is None:
            return True
        while True:
            self._say(_MENU_EDICION)
            opcion = self._leer_opcion()
            if opcion == 0:
                return False
            if opcion in _CAMPOS_EDICION:
                self._editar_campo(edicion, *_CAMPOS_EDICION[opcion])
                return True
            if opcion == 3:
                id_editorial = self.menu_escoger_editorial_insercion()
                if id_editorial is not None:
                    edicion.id_editorial = id_editorial
                return True
            self._say(_INVALIDA)

    def menu_modificacion_listado_ediciones(self) -> bool:
        """Add, remove or change an edition of the selected book; False on going back."""
        while True:
            self._say(_MENU_LISTADO_EDICIONES)
            opcion = self._leer_opcion()
            if opcion == 0:
                return False
            if opcion == 1:
                self.menu_agregar_edicion()
                return True
            if opcion == 2:
                self.menu_escoger_edicion_eliminacion()
                return True
            if opcion == 3:
                if self.menu_escoger_edicion_modificacion():
                    return True
                continue
            self._say(_INVALIDA)

    def menu_escoger_edicion_eliminacion(self) -> None:
        """Select an edition of the selected book and remove it."""
        if self._libro is None:
            return
        self._say("Cual edicion desea eliminar?")
        pos = self._escoger(self._libro.ediciones, self._imprimir_ediciones)
        if pos is not None:
            self._libro.ediciones.borrar_pos(pos)

    def menu_escoger_edicion_modificacion(self) -> bool:
        """Select an edition of the selected book and modify it."""
        if self._libro is None:
            return True
        self._say("Cual edicion desea modificar?")
        pos = self._escoger(self._libro.ediciones, self._imprimir_ediciones)
        if pos is None:
            return True
        self._edicion = self._libro.ediciones.buscar_pos(pos)
        return self.menu_modificar_edicion()

    # -- listings -----------------------------------------------------------

    def _imprimir_ediciones(self, ediciones: Lista[Edicion]) -> None:
        for j, ed in enumerate(ediciones, 1):
            self._say(f"{j}) {ed.numero_edicion}")
            self._say(f"Id editorial: {ed.id_editorial}")
            self._say(f"Ciudad de publicacion: {ed.ciudad_publicacion}")
            self._say(f"Fecha de publicacion: {ed.fecha_publicacion}")

    def imprimir_lista_libros(self, lista: Lista[Libro]) -> None:
        """Print every book with its editions."""
        for i, libro in enumerate(lista, 1):
            self._say(f"{i}) {libro.nombre} {libro.tipo_poesia} {libro.id_autor}")
            self._imprimir_ediciones(libro.ediciones)

    def imprimir_lista_autores(self, lista: Lista[Autor]) -> None:
        """Print every author with all its fields."""
        for i, a in enumerate(lista, 1):
            self._say(f"{i}) {a.nombre} {a.apellido}")
            self._say(f"Sexo: {a.sexo}")
            self._say(f"Fecha de nacimiento: {a.fecha_nacimiento}")
            self._say(f"Ciudad de nacimiento: {a.ciudad_nacimiento}")
            self._say(f"Pais de nacimiento: {a.pais_nacimiento}")
            self._say(f"Ciudad de residencia: {a.ciudad_residencia}")
            self._say(f"Id del autor: {a.id_autor}")
            self._say(f"Formacion base: {a.formacion_base}")
            self._say(f"Anio inicio en la literatura {a.anio_inicio_literatura}")
            self._say(f"Anio publicacion primera obra {a.anio_publicacion_primera_obra}")

    def imprimir_lista_editoriales(self, lista: Lista[Editorial]) -> None:
        """Print every publisher with all its fields."""
        for i, e in enumerate(lista, 1):
            self._say(f"{i}) {e.nombre_editorial}")
            self._say(f"Id: {e.id_editorial}")
            self._say(f"Ciudad oficina principal: {e.ciudad_oficina_p}")
            self._say(f"Pais oficina principal: {e.pais_oficina_p}")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    Control().menu_principal()
    return 0