"""Catalog of lexical units and their location prefixes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class LexicalUnit:
    """A textbook unit; vocabulary records belong to it by location prefix."""

    id: str
    name: str
    book: str
    prefixes: Tuple[str, ...]


DEFAULT_UNITS: Tuple[LexicalUnit, ...] = (
    LexicalUnit("U0", "En el aula", "Aula 1 · Libro 1", ("U0 #",)),
    LexicalUnit("U1", "Nosotros y nosotras", "Aula 1 · Libro 1", ("U1 #",)),
    LexicalUnit("U2", "Quiero aprender español", "Aula 1 · Libro 1", ("U2 #",)),
    LexicalUnit("U3", "¿Dónde está Santiago?", "Aula 1 · Libro 1", ("U3 #",)),
    LexicalUnit("U4", "¿Cuál prefieres?", "Aula 1 · Libro 1", ("U4 #",)),
    LexicalUnit("U5", "Tus amigos son mis amigos", "Aula 1 · Libro 1", ("U5 #",)),
    LexicalUnit("U6", "Día a día", "Aula 1 · Libro 1", ("U6 #",)),
    LexicalUnit("U7", "A comer", "Aula 1 · Libro 1", ("U7 #",)),
    LexicalUnit("U8", "El barrio ideal", "Aula 1 · Libro 1", ("U8 #",)),
    LexicalUnit("U9", "¿Sabes conducir?", "Aula 1 · Libro 1", ("U9 #",)),
    LexicalUnit("A2U1", "El español y tú", "Aula 2 · Libro 2", ("Aula 2 U1 #",)),
    LexicalUnit("A2U2", "Una vida de película", "Aula 2 · Libro 2", ("Aula 2 U2 #",)),
    LexicalUnit("A2U4", "Hogar dulce hogar", "Aula 2 · Libro 2", ("Aula 2 U4 #",)),
)

DEFAULT_SELECTION: Tuple[str, ...] = ("U5",)


class UnitCatalog:
    """Lookup helpers over an ordered collection of :class:`LexicalUnit`."""

    def __init__(self, units: Iterable[LexicalUnit] = DEFAULT_UNITS) -> None:
        self.units: List[LexicalUnit] = list(units)
        self._by_id: Dict[str, LexicalUnit] = {unit.id: unit for unit in self.units}

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._by_id

    def get(self, unit_id: str) -> LexicalUnit | None:
        return self._by_id.get(unit_id)

    def ids(self) -> List[str]:
        return [unit.id for unit in self.units]

    def prefixes_for(self, unit_ids: Iterable[str]) -> List[str]:
        """Return location prefixes for ``unit_ids``; unknown ids contribute none."""

        prefixes: List[str] = []
        for unit_id in unit_ids:
            unit = self._by_id.get(unit_id)
            if unit is None:
                continue
            for prefix in unit.prefixes:
                if prefix not in prefixes:
                    prefixes.append(prefix)
        return prefixes

    def _name(self, unit_id: str) -> str:
        unit = self._by_id.get(unit_id)
        return unit.name if unit else unit_id

    def describe(self, unit_ids: Sequence[str]) -> str:
        """Phrase used in messages such as "no words found for ..."."""

        if not unit_ids:
            return "las unidades seleccionadas"
        if len(unit_ids) == 1:
            unit = self._by_id.get(unit_ids[0])
            return f"la unidad «{unit.name}»" if unit else "la unidad seleccionada"
        if len(unit_ids) <= 3:
            names = [
                f"«{self._by_id[uid].name}»" if uid in self._by_id else uid
                for uid in unit_ids
            ]
            return f"las unidades {', '.join(names)}"
        return f"las {len(unit_ids)} unidades seleccionadas"

    def selection_label(self, unit_ids: Sequence[str]) -> str:
        """Short label summarising the current selection."""

        if len(unit_ids) == len(self.units) and set(unit_ids) == set(self._by_id):
            return "Unidades: Todas"
        if len(unit_ids) == 1:
            return f"Unidad: {self._name(unit_ids[0])}"
        if 1 < len(unit_ids) <= 3:
            return "Unidades: " + " + ".join(self._name(uid) for uid in unit_ids)
        if len(unit_ids) > 3:
            return f"Unidades: {len(unit_ids)} seleccionadas"
        return "Seleccionar unidades"
