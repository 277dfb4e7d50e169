# fabrica

A small console planner for a factory that makes five products out of four kinds
of parts: chips, screens, microphones and speakers. It answers one question: can
this order be made before the deadline with the parts in stock?

The prompts and messages are in Spanish.

## Installation

```
pip install .
```

## Running

```
fabrica
```

The main menu offers these options:

1. Enter the names of the five products and how long each one takes to make.
   Names are cut to 29 characters. Times must be positive.
2. Enter the parts in stock. Each amount must be positive. The planner then
   lists the parts each product needs.
3. Work out an order. You enter the demand for each of the five products, then
   choose a product to see its total production time (demand × time per unit),
   then choose a product to see the parts its demand needs. A product number
   outside 1–5 gives zero. After that, a second menu offers these options:
   - Check the order against a customer deadline and the stock. When the
     deadline is at least the production time and every part is in stock in
     the needed amount, the parts are taken out of the stock.
   - Edit a product by name: new name, demand and production time. The time
     and parts are then worked out again.
   - Show the current stock.
   - Add a positive amount of one kind of part (1 chips, 2 screens,
     3 microphones, 4 speakers).
   - Go back.
4. Remove a product from the catalogue by name. This empties its slot.
5. Quit.

The session also ends when the input runs out.

Each unit ordered of a product needs a fixed number of each part:

| Product | Chips | Screens | Microphones | Speakers |
|---------|-------|---------|-------------|----------|
| 1       | 4     | 1       | 2           | 3        |
| 2       | 3     | 2       | 1           | 2        |
| 3       | 5     | 4       | 3           | 6        |
| 4       | 7     | 3       | 2           | 5        |
| 5       | 2     | 5       | 3           | 5        |

## Using it as a library

The rules behind the menus are in `fabrica.planning`:

```python
from fabrica.planning import Resources, ResourceKind, requirements_for, meets_deadline

stock = Resources(chips=40, screens=10, microphones=20, speakers=30)
needed = requirements_for(1, 10)      # product 1, ten units
if stock.covers(needed) and meets_deadline(required_time=50, deadline=60):
    stock.subtract(needed)
stock.add(ResourceKind.CHIPS, 5)
```

- `Resources` holds an amount of each part. It has these methods:
  - `satisfied_count(needed)` counts the parts whose stock reaches the needed amount.
  - `covers(needed)` is true when all four parts do.
  - `subtract(needed)` takes the amounts out.
  - `add(kind, amount)` accepts a `ResourceKind` or its number from 1 to 4, and
    raises `ValueError` when the amount is not positive.
- `requirements_for(number, demand)` returns the parts needed for `demand` units
  of product `number`. It raises `ValueError` when the number is outside 1–5.
- `meets_deadline(required_time, deadline)` is true when the deadline is at
  least the required time. It raises `ValueError` when the deadline is not
  positive.
- `Catalog` holds five `Product` slots, each with a name, time and demand. It
  has these methods:
  - `production_time(number)` and `requirements(number)` give the figures for
    product `number`.
  - `index_of(name)` finds a product's slot.
  - `edit(name, new_name, demand, time)` changes a product. It raises
    `ValueError` when the demand or time is not positive.
  - `remove(name)` empties a product's slot.

  A name that is not in the catalogue raises `ProductNotFoundError`.

You can drive a whole interactive session from any pair of text streams with
`fabrica.cli.run(input_stream, output_stream)`. It returns the finished
`Session`, and that session holds the final `catalog` and `resources`.

## What it does not do

Everything lives in memory for a single session. The planner saves nothing
between runs: no products, no stock and no orders.

## Tests

```
pip install .[test]
pytest
```