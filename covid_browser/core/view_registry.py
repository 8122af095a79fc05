from __future__ import annotations
from typing import Dict, List, Type

from .dataset import Dataset
from .base_view import BaseView


class ViewRegistry:
    """
    Catalogue of the view classes the browser can show.

    The view selector and the render callback both work from this catalogue,
    so adding a view means registering it here and nothing else.

    Classes are stored rather than instances; a fresh view is built for each
    render, bound to whichever Dataset the session has selected.
    Ids must be unique and every entry must derive from {@link BaseView}.
    """

    def __init__(self):
        self._by_id: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Add a view class to the catalogue.

        :param view_cls: a {@link BaseView} subclass with a unique 'id'

        Raises:
            TypeError: view_cls is not a BaseView subclass
            ValueError: the id is already taken
        """
        if not (isinstance(view_cls, type) and issubclass(view_cls, BaseView)):
            raise TypeError(f"{view_cls!r} is not a BaseView subclass")

        if view_cls.id in self._by_id:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._by_id[view_cls.id] = view_cls

    def create(self, view_id: str, dataset: Dataset) -> BaseView:
        """
        Build the view registered under view_id for this dataset.

        Raises:
            KeyError: nothing is registered under view_id
        """
        view_cls = self._by_id.get(view_id)
        if view_cls is None:
            raise KeyError(f"View '{view_id}' not found")
        return view_cls(dataset)

    def get_class(self, view_id: str) -> Type[BaseView] | None:
        return self._by_id.get(view_id)

    def all_classes(self) -> List[Type[BaseView]]:
        """Registered classes in registration order (the order the selector lists them)."""
        return list(self._by_id.values())
