"""Scene objects arranged in a parent/child hierarchy."""

from __future__ import annotations

import weakref
from typing import Callable, ClassVar, List, Optional, Tuple

from .event import Event
from .log import Level, log
from .transform import Transform


class GameObject:
    """An object in the scene with a transform, children and lifecycle hooks."""

    _objects: ClassVar[List[GameObject]] = []

    def __init__(self) -> None:
        self._children: List[GameObject] = []
        self._parent_ref: Optional[weakref.ReferenceType] = None
        self._started = False
        self._late_started = False
        self._destroyed = False
        self.late_start_event = Event()
        self.late_update_event = Event()
        self.transform = Transform(self)

    @classmethod
    def instantiate(cls, obj: GameObject, parent: Optional[GameObject] = None) -> GameObject:
        """Register ``obj`` as a root object, or as a child of ``parent``."""
        if not isinstance(obj, GameObject):
            raise TypeError("only GameObject instances can be instantiated")
        if parent is not None:
            parent._attach(obj)
        else:
            GameObject._objects.append(obj)
        return obj

    @classmethod
    def destroy(cls, obj: GameObject, remove_from_objects: bool = True) -> None:
        """Detach ``obj``, run its destroy hooks and those of its children."""
        if obj._destroyed:
            log(Level.ERROR, "Object destroyed twice", engine=True)

        parent = obj.parent
        if parent is not None:
            parent.remove_component(obj)

        obj.on_destroy()
        obj._destroyed = True
        for child in tuple(obj._children):
            cls.destroy(child, False)

        if remove_from_objects:
            GameObject._objects[:] = [o for o in GameObject._objects if o is not obj]

    @classmethod
    def _run_all(cls, func: Callable[[GameObject], None]) -> None:
        for obj in tuple(GameObject._objects):
            obj._run_event(func)

    @classmethod
    def run_start(cls) -> None:
        """Start every object not yet started, then fire the late-start events."""

        def start(obj: GameObject) -> None:
            if not obj._started:
                obj.start()
                obj._started = True

        def late_start(obj: GameObject) -> None:
            if not obj._late_started:
                obj.late_start_event(obj)
                obj._late_started = True

        cls._run_all(start)
        cls._run_all(late_start)

    @classmethod
    def run_update(cls) -> None:
        """Update every object, starting new ones first, then fire late-update events."""

        def update(obj: GameObject) -> None:
            if not obj._started:
                obj.start()
                obj._started = True
            obj.update()

        def late_update(obj: GameObject) -> None:
            obj.late_update_event(obj)

        cls._run_all(update)
        cls._run_all(late_update)

    @classmethod
    def hierarchy(cls) -> List[str]:
        """Return one line per object, indented with tabs by depth."""
        lines: List[str] = []
        for obj in GameObject._objects:
            obj._collect_hierarchy(0, lines)
        return lines

    @classmethod
    def print_hierarchy(cls) -> None:
        log(Level.INFO, "\n\nObjects hierarchy:", engine=True)
        for line in cls.hierarchy():
            log(Level.INFO, line, engine=True)
        log(Level.INFO, "\n\n", engine=True)

    @classmethod
    def objects(cls) -> Tuple[GameObject, ...]:
        return tuple(GameObject._objects)

    @classmethod
    def clear_objects(cls) -> None:
        GameObject._objects.clear()

    def _run_event(self, func: Callable[[GameObject], None]) -> None:
        if self._destroyed:
            log(Level.ERROR, "Destroyed object is still running events", engine=True)
        func(self)
        for child in tuple(self._children):
            child._run_event(func)

    def _collect_hierarchy(self, level: int, lines: List[str]) -> None:
        lines.append("\t" * level + self.type_name)
        for child in self._children:
            child._collect_hierarchy(level + 1, lines)

    def _attach(self, child: GameObject) -> None:
        child.remove_parent()
        self._children.append(child)
        child._parent_ref = weakref.ref(self)
        child.transform.update_matrix()

    def remove_parent(self) -> None:
        parent = self.parent
        if parent is not None:
            parent.remove_component(self)
        self._parent_ref = None

    def set_parent(self, parent: GameObject) -> None:
        parent._attach(self)

    def add_component(self, child: GameObject) -> GameObject:
        return GameObject.instantiate(child, self)

    def remove_component(self, child: GameObject) -> None:
        child._parent_ref = None
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                break

    @property
    def has_parent(self) -> bool:
        return self.parent is not None

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def children(self) -> Tuple[GameObject, ...]:
        return tuple(self._children)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    def on_destroy(self) -> None:
        """Called once when the object is destroyed."""

    def start(self) -> None:
        """Called once before the object's first update."""

    def update(self) -> None:
        """Called every frame."""