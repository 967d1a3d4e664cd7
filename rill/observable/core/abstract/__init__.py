"""Mixins shared by observable classes."""

from rill.observable.core.abstract.operations import OperationsMixin, OperatorMixin

__all__ = ["OperationsMixin", "OperatorMixin"]
