"""Interactive menu for planning factory orders."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .planning import (
    PRODUCT_SLOTS,
    Catalog,
    ProductNotFoundError,
    ResourceKind,
    Resources,
    meets_deadline,
)

NAME_LIMIT = 29
_INT = re.compile(r"\s*([+-]?\d+)")

MAIN_MENU = (
    "selecciones una opcion\n"
    "1.ingresar nombres, tiempo que se demora en fabricar  el producto\n"
    "2.ingresar recursos disponibles en la fabrica\n"
    "3.Calcular un pedido\n"
    "4.eliminar producto del catalogo\n"
    "5.salir\n"
)

ORDER_MENU = (
    "selecciones una opcion\n"
    "1.ver si se puede cumplir con el trabajo\n"
    "2.editar informacion de producto\n"
    "3.ver stock actual y tiempo disponible restante\n"
    "4.agregar un nuevo stock\n"
    "5.salir\n"
)

_TIME_ERROR = (
    "Error: el tiempo debe ser un número entero positivo\n"
    "Ingrese el tiempo nuevamente: "
)
_DEMAND_ERROR = (
    "Error: la demanda debe ser un número entero positivo\n"
    "Ingrese la demanda nuevamente: "
)
_AMOUNT_ERROR = (
    "Error: la cantidad debe ser un número entero positivo\n"
    "Ingrese  la cantidad nuevamente: "
)
_RESOURCE_ERROR = "Ingrese los recursos nuevamente: "

_STOCK_PROMPTS = (
    ("chips", " ingrese la cantidad de chips disponibles en el inventario\n"),
    ("screens", " ingrese la cantidad de pantallas  disponibles en el inventario\n"),
    ("microphones", " ingrese la cantidad de  microfonos  disponibles en el inventario\n"),
    ("speakers", " ingrese la cantidad de altavoces disponibles en el inventario\n"),
)

_REQUIREMENT_LINES = (
    "se necesitan 4 chips, 1 pantalla,2 microfonos y 3 altavoces para el producto 1",
    "se necesitan 3 chips, 2 pantalla,1 microfonos y 2 altavoces para el producto 2",
    "se necesitan 5 chips, 4 pantalla,3 microfonos y 6 altavoces para el producto 3",
    "se necesitan 7 chips, 3 pantalla,2 microfonos y 5 altavoces para el producto 4",
    "se necesitan 2 chips, 5 pantalla,3 microfonos y 5 altavoces para el producto 5",
)


class Session:
    """One interactive session over a pair of text streams."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self.input = input_stream
        self.output = output_stream
        self.catalog = Catalog()
        self.resources = Resources()
        self.required_time = 0
        self.needed = Resources()

    def _write(self, text: str) -> None:
        self.output.write(text)

    def _read_line(self) -> str:
        line = self.input.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self) -> int | None:
        match = _INT.match(self._read_line())
        return int(match.group(1)) if match else None

    def _read_positive(self, error: str) -> int:
        value = self._read_int()
        while value is None or value <= 0:
            self._write(error)
            value = self._read_int()
        return value

    def _read_name(self) -> str:
        return self._read_line()[:NAME_LIMIT]

    def run(self) -> None:
        """Run the main menu until the user leaves or input ends."""
        self._write("Bienvenido\n")
        try:
            while True:
                self._write(MAIN_MENU)
                choice = self._read_int()
                if choice == 1:
                    self._define_products()
                elif choice == 2:
                    self._enter_stock()
                elif choice == 3:
                    self._orders()
                elif choice == 4:
                    self._remove_product()
                elif choice == 5:
                    break
        except EOFError:
            return
        self._write("gracias por usar el programa\n")

    def _define_products(self) -> None:
        for number, product in enumerate(self.catalog.products, start=1):
            self._write(f"ingrese el nombre del producto numero {number}\n")
            product.name = self._read_name()
            self._write("ingrese el tiempo que se demora en hacer el producto\n")
            product.time = self._read_positive(_TIME_ERROR)

    def _enter_stock(self) -> None:
        for attribute, prompt in _STOCK_PROMPTS:
            self._write(prompt)
            setattr(self.resources, attribute, self._read_positive(_RESOURCE_ERROR))
        for line, product in zip(_REQUIREMENT_LINES, self.catalog.products):
            self._write(f"{line} con el nombre de {product.name}\n")

    def _orders(self) -> None:
        while True:
            self._write(
                "Desea realizar un pedido? Ingrese 1 para repetir, "
                "cualquier otro número para salir:\n"
            )
            if self._read_int() != 1:
                return
            self._enter_demands()
            self._calculate()
            self._order_menu()

    def _enter_demands(self) -> None:
        for number, product in enumerate(self.catalog.products, start=1):
            self._write(f"ingrese la demanda del producto {number}\n")
            product.demand = self._read_positive(_TIME_ERROR)

    def _calculate(self) -> None:
        self._write(
            "seleccione el numero del producto para calcular el tiempo requerido\n"
        )
        number = self._read_int()
        try:
            self.required_time = self.catalog.production_time(number)
        except ValueError:
            self.required_time = 0
        self._write(
            "el tiempo necesario para cumplir con la demanda es de "
            f"{self.required_time}\n"
        )
        self._write(
            "Seleccione el producto  a calcular la cantidad de componentes "
            f"necesarios (1-{PRODUCT_SLOTS}): "
        )
        number = self._read_int()
        try:
            self.needed = self.catalog.requirements(number)
        except ValueError:
            self.needed = Resources()
        self._write(f"el total de chips que necesita es de {self.needed.chips}\n")
        self._write(f"el total de pantallas que necesita es de {self.needed.screens}\n")
        self._write(
            f"el total de microfonos que necesita es de {self.needed.microphones}\n"
        )
        self._write(f"el total de altavoces que necesita es de {self.needed.speakers}\n")

    def _order_menu(self) -> None:
        while True:
            self._write(ORDER_MENU)
            choice = self._read_int()
            if choice == 1:
                self._check_order()
            elif choice == 2:
                self._edit_product()
                self._calculate()
            elif choice == 3:
                self._show_stock()
            elif choice == 4:
                self._add_stock()
            elif choice == 5:
                return

    def _check_order(self) -> None:
        self._write("ingrese el tiempo limite a entregar el pedido\n")
        deadline = self._read_positive(_TIME_ERROR)
        on_time = meets_deadline(self.required_time, deadline)
        if not on_time:
            self._write("el no se puede realizar el pedido en el tiempo establecido\n")
        satisfied = self.resources.satisfied_count(self.needed)
        if satisfied < len(ResourceKind):
            self._write(
                "no se puede cumplir la demanda ya que no hay suficientes recursos\n"
            )
        self._write(f"Valor de s: {int(on_time)}, Valor de n: {satisfied}\n")
        if on_time and satisfied == len(ResourceKind):
            self._write(
                "si se puede realizar el pedido ya que existe suficiente demanda y "
                "se puede cumplir en el tiempo establecido\n"
            )
            self.resources.subtract(self.needed)
        else:
            self._write(
                "no se puede realizar el pedido recursos(n) o tiempo(s) insufucientes\n"
            )

    def _edit_product(self) -> None:
        self._write("Ingrese el nombre del producto que desea editar: ")
        name = self._read_name()
        try:
            index = self.catalog.index_of(name)
        except ProductNotFoundError:
            self._write("Producto no encontrado en el catálogo.\n")
            return
        self._write(f"Producto encontrado: {self.catalog.products[index].name}\n")
        self._write("Ingrese el nuevo nombre del producto: ")
        new_name = self._read_name()
        self._write("ingrese la nueva demanda\n")
        demand = self._read_positive(_DEMAND_ERROR)
        self._write("Ingrese el nuevo tiempo de produccion del producto: ")
        time = self._read_positive(_TIME_ERROR)
        product = self.catalog.edit(name, new_name, demand, time)
        self._write(f"Nombre actualizado: {product.name}\n")
        self._write(f"Demanda actualizada: {product.demand}\n")
        self._write(f"Tiempo actualizado: {product.time}\n")

    def _show_stock(self) -> None:
        self._write(f"el stock de chips actual es del {self.resources.chips}\n")
        self._write(f"el stock de pantallas actuales es de {self.resources.screens}\n")
        self._write(
            f"el stock de microfonos actuales es de {self.resources.microphones}\n"
        )
        self._write(f"el stock de altavoces actuales es de {self.resources.speakers}\n")

    def _add_stock(self) -> None:
        self._write("seleccione que recurso desea agregar\n")
        kind = self._read_int()
        self._write("seleccione la cantidad a agregar\n")
        amount = self._read_positive(_AMOUNT_ERROR)
        try:
            self.resources.add(kind, amount)
        except ValueError:
            pass

    def _remove_product(self) -> None:
        self._write("Ingrese el nombre del producto que desea eliminar: ")
        name = self._read_name()
        try:
            self.catalog.remove(name)
        except ProductNotFoundError:
            self._write("Producto no encontrado\n")
        else:
            self._write("Producto eliminado con éxito\n")


def run(input_stream: TextIO, output_stream: TextIO) -> Session:
    """Run a session over the given streams and return it."""
    session = Session(input_stream, output_stream)
    session.run()
    return session


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0