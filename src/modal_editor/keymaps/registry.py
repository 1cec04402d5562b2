"""Registry holding the fixed key binding table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, Optional

from modal_editor.runtime.telemetry import span

from .models import Binding

if TYPE_CHECKING:  # pragma: no cover
    from modal_editor.modes.base_mode import EditorMode


@dataclass(slots=True)
class RegistryStats:
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a binding reuses a key already bound in the same mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on key {binding.key!r} in mode '{binding.mode.value}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Maps ``(mode, key token)`` pairs to bindings."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._index: Dict[tuple[str, str], str] = {}
        self._logger_name = logger_name

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode.value},
        ) as handle:
            existing_id = self._index.get(binding.signature)
            conflict = existing_id is not None and existing_id != binding.id
            if conflict:
                handle.add_metadata("conflict", existing_id)
            if not replace:
                if conflict:
                    raise KeymapConflictError(binding, self._bindings[existing_id])
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
            else:
                if conflict:
                    self.unregister_binding(existing_id)
                self.unregister_binding(binding.id)

            self._bindings[binding.id] = binding
            self._index[binding.signature] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is not None:
            self._index.pop(binding.signature, None)
        return binding

    def lookup(self, mode: "EditorMode", key: str) -> Optional[Binding]:
        binding_id = self._index.get((mode.value, key))
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def iter_bindings(self, mode: Optional["EditorMode"] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if mode is None or binding.mode == mode:
                yield binding

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            modes=tuple(sorted({mode for mode, _ in self._index})),
        )


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
