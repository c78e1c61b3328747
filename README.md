# poetario

poetario is a small interactive console catalogue for poetry. It records
authors, publishers (*editoriales*) and books. Each book can have any number of
editions. All menus and prompts are in Spanish.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Running

```
poetario
```

The main menu offers these operations:

- `8` adds a book. You enter its name, choose its poetry type and choose its
  author from the registered authors. You then add its editions. Each edition
  has a number, a publication date, a publisher and a city. After the book is
  stored, the current lists of books, authors and publishers are printed.
- `10` modifies a book. You can change its name, its type or its author. You
  can also work on its list of editions: add an edition, remove one, or change
  one.
- `11` adds an author and `13` modifies one.
- `14` adds a publisher and `16` modifies one.
- `0` leaves the program.

The poetry types are Decima, Soneto, Himno, Haiku, Romance, Octava real, Lira
and Verso libre. An author's background is chosen from a fixed list, or typed
in freely under "Otros".

Answers are read one whitespace-separated word at a time, so a name made of
several words is taken as several answers. If a number is expected and you
type something else, you are asked again. An invalid menu choice prints
"Opcion invalida, intenta de nuevo." and the menu is shown again. The session
also ends when the input runs out.

## What it does not do

- The main-menu queries `1` to `7` are not implemented. These cover works per
  author, authors per publisher, publisher counts, counts by sex, age ranges,
  and authors by poetry type and publisher. Choosing one of them simply returns
  to the menu.
- The deletions `9`, `12` and `15` (book, author, publisher) are not
  implemented either. Editions can be removed, but only from the book
  modification menu.
- Nothing is saved. The catalogue exists only in memory and is lost when the
  session ends.

## Using it from Python

`poetario.lista.Lista` is a list with 1-based positions. Its methods are:

- `lista_vacia`
- `insertar_inicio`
- `insertar_final`
- `insertar_pos`
- `borrar_pos`, which also returns the removed element
- `modificar_pos`
- `buscar_pos`

A position out of range raises `IndexError`. `Lista` also supports `len()` and
iteration.

`poetario.models` defines the records as dataclasses: `Autor`, `Editorial`,
`Libro` and `Edicion`. `Libro.ediciones` is a `Lista` of editions. The same
module holds the choice enumerations `TipoPoesia`, `Sexo` and `Formacion`.

`poetario.control.Control` is the interactive session. It takes an input
stream and an output stream, so you can drive it from a script. The
catalogue it builds is kept in its `libros`, `autores` and `editoriales`
attributes:

```python
import io
from poetario.control import Control

out = io.StringIO()
control = Control(io.StringIO("14 1 Norma Bogota Colombia 0"), out)
control.menu_principal()
print(control.editoriales.buscar_pos(1).nombre_editorial)  # Norma
print(out.getvalue())
```

The `poetario` command runs `poetario.control.main`. That function starts a
session on standard input and output.

## Tests

```
pytest
```