"""
Resolution of the external prediction engine.

The engine is named on the command line by ``factory_path``, which is either
a Python source file or a dotted module path, optionally followed by
``:AttributeName``::

    /opt/engines/panorama_engine.py
    /opt/engines/panorama_engine.py:PanoramaFactory
    vendor.engine
    vendor.engine:PanoramaFactory

Without an attribute the module must define exactly one concrete
:class:`PredictorFactory` subclass.
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from sample_predictor.core.exceptions import FactoryLoadError, PreconditionError
from sample_predictor.core.logging import get_logger

from .interface import Predictor, PredictorFactory

logger = get_logger(__name__)


def require_path(value: str | None, name: str) -> str:
    """Return ``value`` or raise PreconditionError if it is None or blank."""
    if value is None or not str(value).strip():
        raise PreconditionError(name)
    return str(value)


def split_factory_path(factory_path: str) -> tuple[str, str | None]:
    """Split ``module_or_file[:Attribute]`` into its two parts.

    A colon is only treated as the attribute separator when it is followed
    by a valid identifier, so Windows drive letters are left alone.
    """
    target, sep, attribute = factory_path.rpartition(":")
    if sep and target and attribute.isidentifier():
        return target, attribute
    return factory_path, None


def import_engine_module(target: str) -> ModuleType:
    """Import the engine module from a file path or a dotted module path.

    Raises:
        FactoryLoadError: If the module cannot be found.
    """
    path = Path(target)
    if path.suffix == ".py" or path.is_file():
        if not path.is_file():
            raise FactoryLoadError(f"The prediction engine file '{target}' does not exist!")

        module_name = f"_sample_predictor_engine_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise FactoryLoadError(f"Cannot import the prediction engine file '{target}'")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    try:
        return importlib.import_module(target)
    except ModuleNotFoundError as e:
        raise FactoryLoadError(f"Cannot import the prediction engine module '{target}': {e}") from e


def _find_factory_class(module: ModuleType) -> type[PredictorFactory]:
    candidates = [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj)
        and issubclass(obj, PredictorFactory)
        and not inspect.isabstract(obj)
        and obj.__module__ == module.__name__
    ]
    if not candidates:
        raise FactoryLoadError(
            f"The module '{module.__name__}' does not define a PredictorFactory implementation"
        )
    if len(candidates) > 1:
        names = sorted(c.__name__ for c in candidates)
        raise FactoryLoadError(
            f"The module '{module.__name__}' defines several PredictorFactory implementations "
            f"{names}; select one with '<path>:<ClassName>'"
        )
    return candidates[0]


def _is_factory(obj: Any) -> bool:
    return isinstance(obj, PredictorFactory) or callable(getattr(obj, "read_model_from_file", None))


def _is_predictor(obj: Any) -> bool:
    if isinstance(obj, Predictor):
        return True
    return callable(getattr(obj, "predict", None)) and callable(getattr(obj, "get_result_preview", None))


def load_factory(factory_path: str) -> PredictorFactory:
    """Create the prediction engine factory named by ``factory_path``.

    Args:
        factory_path: Engine file or module, optionally ``:Attribute``.

    Returns:
        A factory instance. Classes are instantiated without arguments.

    Raises:
        PreconditionError: If ``factory_path`` is blank.
        FactoryLoadError: If no factory can be resolved.
    """
    factory_path = require_path(factory_path, "factory_path")
    target, attribute = split_factory_path(factory_path)
    module = import_engine_module(target)

    if attribute is None:
        obj: Any = _find_factory_class(module)
    else:
        try:
            obj = getattr(module, attribute)
        except AttributeError:
            raise FactoryLoadError(
                f"The prediction engine '{target}' has no attribute '{attribute}'"
            ) from None

    if inspect.isclass(obj):
        obj = obj()

    if not _is_factory(obj):
        raise FactoryLoadError(
            f"'{factory_path}' does not implement the PredictorFactory interface"
        )

    logger.debug(f"Using prediction engine factory {type(obj).__name__} from {target}")
    return obj


def create_predictor(factory_path: str | None, model_path: str | None) -> Predictor:
    """Load a calibration model through the external engine.

    Both paths are checked before the engine is touched. Exceptions raised
    by the engine itself propagate unchanged.

    Args:
        factory_path: Engine file or module, optionally ``:Attribute``.
        model_path: Calibration model file.

    Returns:
        A ready predictor.

    Raises:
        PreconditionError: If either path is None or blank.
        FactoryLoadError: If the engine cannot be resolved or returns
            something that is not a predictor.
    """
    factory_path = require_path(factory_path, "factory_path")
    model_path = require_path(model_path, "model_path")

    factory = load_factory(factory_path)

    logger.info(f"Reading calibration model {model_path}")
    predictor = factory.read_model_from_file(model_path)
    if not _is_predictor(predictor):
        raise FactoryLoadError(
            f"The prediction engine returned {type(predictor).__name__} instead of a Predictor"
        )
    return predictor
