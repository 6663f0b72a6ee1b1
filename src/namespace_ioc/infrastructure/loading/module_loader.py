import importlib.util
import logging
import re
import sys
import threading
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Sequence

from namespace_ioc.domain import IModuleLoader

logger = logging.getLogger(__name__)

_MODULE_NAME_PREFIX = "namespace_ioc_autoload"
_NON_IDENTIFIER = re.compile(r"\W")


class FileModuleLoader(IModuleLoader):
    """Loads Python files addressed by autoloaded namespaces.

    A path without extension is looked up as ``<path>.py`` first and as the
    package ``<path>/__init__.py`` second. Each file is executed once; later
    loads return the cached module.

    The value returned is the module's default export: the attribute named
    after the file (``Mailer.py`` exports ``Mailer``) when it exists,
    otherwise the module itself.

    Attributes:
        _extensions: File extensions accepted as-is when already present on the path.
        _modules: Cache of loaded modules keyed by resolved file path.
    """

    def __init__(self, extensions: Sequence[str] = (".py",)) -> None:
        self._extensions = tuple(extensions)
        self._modules: Dict[str, ModuleType] = {}
        self._lock = threading.RLock()

    def _candidates(self, path: Path) -> List[Path]:
        if path.suffix in self._extensions:
            return [path]
        return [path.with_name(path.name + extension) for extension in self._extensions] + [path / "__init__.py"]

    def _find(self, path: str) -> Path:
        for candidate in self._candidates(Path(path)):
            if candidate.is_file():
                return candidate.resolve()
        raise ModuleNotFoundError(f"Cannot find module {path}", path=path)

    def _execute(self, file_path: Path) -> ModuleType:
        module_name = _MODULE_NAME_PREFIX + _NON_IDENTIFIER.sub("_", str(file_path))
        spec = importlib.util.spec_from_file_location(module_name, file_path)
        if spec is None or spec.loader is None:
            raise ModuleNotFoundError(f"Cannot load module {file_path}", path=str(file_path))

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del sys.modules[module_name]
            raise
        return module

    def load(self, path: str) -> Any:
        """Load the file at ``path`` and return its default export.

        Args:
            path: File path computed from an autoload rule, with or without extension.

        Returns:
            The attribute named after the file, or the module when there is none.

        Raises:
            ModuleNotFoundError: If no file exists at the path.
        """
        file_path = self._find(path)
        key = str(file_path)

        with self._lock:
            module = self._modules.get(key)
            if module is None:
                logger.debug("Loading module from %s", key)
                module = self._execute(file_path)
                self._modules[key] = module

        export_name = file_path.parent.name if file_path.name == "__init__.py" else file_path.stem
        return getattr(module, export_name, module)
