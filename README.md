# practica

A collection of small, self-contained programs for practising everyday
programming tasks: vector arithmetic and a text-mode ray caster, triangle
lists, triangles in space, integer sequence processing, flat and solid
shapes, a phone registry, product lists and bookstore queries.

Every program is a module of the `practica` package with a `main(argv=None)`
function, and each has a command of its own. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | Module | What it does |
| --- | --- | --- |
| `practica-render` | `practica.render` | Animates a sphere, a box and a floor as ASCII art in the terminal (`--width`, `--height`, `--frames`) |
| `practica-triangles` | `practica.triangles` | Reads triangle sides (default `triangles.txt`), sorts by area and writes a report (default `output.txt`) including those with perimeter between 10 and 1000 |
| `practica-spacetriangle` | `practica.spacetriangle` | Reads `!`, three points and a menu choice from standard input and prints facts about the triangle |
| `practica-sequences` | `practica.sequences` | Runs a chain of transformations over integers read from a file (default `input2.txt`, output `output.txt`) |
| `practica-sequences-v1` | `practica.sequences_v1` | A value-driven variant (default `input_2.txt`, at least 10 numbers), also printing a cosine series and an alternating sum |
| `practica-shapes` | `practica.shapes` | Lists areas, volumes, perimeters and surface areas of a fixed set of shapes, then finds shapes by a value given as argument or on standard input |
| `practica-directory` | `practica.directory` | Builds a sample phone registry, writes `phones.txt`, prints queries and writes `owner_stats.txt` (`--directory`) |
| `practica-telephones` | `practica.telephones` | Reads radiotelephones (`file1.txt`) and mobile phones (`file2.txt`) and writes a price report (`file3.txt`) |
| `practica-products` | `practica.products` | Reads products (`products.txt`), writes dairy products up to a price to `dairy_products.txt` and prints meat products above a stock (`--max-price`, `--min-stock`) |
| `practica-bookstore` | `practica.bookstore` | Compares bookstore `Knigarnya2` with `Knigarnya` from `BOOKSTORES.txt` (`--directory`) |
| `practica-bookshop` | `practica.bookshop` | Another set of bookstore queries over `BOOKSTORY.txt` (`--directory`) |
| `practica-bookstore-manager` | `practica.bookstore_manager` | Interactive queries over bookstores separated by blank lines in `BOOKSTORY.txt` (`--directory`) |

Positional file arguments may be given to override the default file names.

## Using the library

### Vectors

```python
from practica.vectors import Vec3, reflect, sphere

ray_origin = Vec3(-6, 0, 0)
ray_dir = Vec3(1, 0, 0)
hit = sphere(ray_origin, ray_dir, 1)        # Vec2(5.0, 7.0); (-1, -1) on a miss
bounce = reflect(ray_dir, Vec3(-1, 0, 0))   # Vec3(-1, 0, 0)
```

`box(ro, rd, box_size)` returns the near and far distances together with
the surface normal, and `plane(ro, rd, p, w)` the distance to a plane.
`practica.render.render_frame(width, height, t)` returns one frame as a
list of text rows.

### Triangles

```python
from practica.triangles import Triangle, filter_by_perimeter

t = Triangle(3.0, 4.0, 5.0)
t.perimeter()   # 12.0
t.area()        # 6.0

matches = filter_by_perimeter([t, Triangle(10, 11, 12)], 9.0, 20.0)  # [t]
```

`TriangleList` keeps triangles with the newest at the front and supports
`add`, `remove`, `search`, iteration and `len`.

### Shapes

```python
from practica.shapes import Circle, Cone, sort_flat_by_area, sort_by_volume

flat = sort_flat_by_area([Circle(3), Circle(9)])   # largest area first
solid = sort_by_volume([Cone(10, 20), Cone(1, 2)])  # smallest volume first
```

### Bookstores

```python
from practica.bookstore import Book, Bookstore

store = Bookstore("Knigarnya")
store.add_book(Book("Dagon", "G.I.Lafcraft", 120.0, "UAH"))
store.add_book(Book("Azathoth", "G.I.Lafcraft", 240.0, "UAH"))
store.total_cost()                            # 360.0
store.has_neighbor_books_with_double_price()  # True
```

`Bookstore.find_first_pair_with_double_price` raises `NoPairFound` when no
pair exists, rather than returning a sentinel value.

## What it does not do

- `practica-render` draws with ANSI escape codes in the current terminal;
  it does not resize the terminal window.
- `practica-directory` always works on its built-in sample registry; the
  `MobileOperator.read` method can load a registry file, but the command
  does not.