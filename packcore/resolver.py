"""
Module path resolution.

Maps the path literal of an import onto the id of a dependency. A module's id
is its position in the dependency list, with the entry module at 0.
"""
import os

from packcore.errors import UnresolvedImportError

# Id used for imports that match no dependency when strict_imports is off.
# The bundle's loader throws when asked for it.
NOT_FOUND = -1


class ModuleResolver:
    """
    Resolves import paths against a dependency list.

    The lookup table is built once from the dependency names. Each module is
    indexed under its exact name, under its name without a script extension,
    and, for index files, under its directory. The first module to claim a
    key keeps it.
    """

    def __init__(self, dependencies, config):
        self.config = config
        self._ids = {}
        for module_id, dependency in enumerate(dependencies):
            for key in self._keys_for(dependency.name):
                self._ids.setdefault(key, module_id)

    def _keys_for(self, name):
        path = os.path.normpath(name)
        keys = [path]
        stem, ext = os.path.splitext(path)
        if ext in self.config.extensions:
            keys.append(stem)
            if os.path.basename(stem) == "index":
                keys.append(os.path.dirname(stem))
        return keys

    def resolve_path(self, import_path, importer=None):
        """Turn an import literal into the absolute path it refers to."""
        if self.config.resolve_from == "importer" and importer:
            base = os.path.dirname(importer)
            return os.path.normpath(os.path.join(base, import_path))

        # A leading ./ is rooted under the source directory
        if import_path.startswith("./"):
            import_path = os.path.join(self.config.source_root, import_path[2:])
        return os.path.normpath(os.path.join(self.config.root, import_path))

    def resolve(self, import_path, importer=None):
        """
        Find the module id an import refers to.

        Args:
            import_path: The literal source path of the import
            importer: Name of the module containing the import

        Returns:
            The module id, or NOT_FOUND when strict_imports is off and no
            dependency matches

        Raises:
            UnresolvedImportError: If no dependency matches and strict_imports is on
        """
        resolved = self.resolve_path(import_path, importer)
        module_id = self._ids.get(resolved)
        if module_id is not None:
            return module_id
        if self.config.strict_imports:
            raise UnresolvedImportError(import_path, resolved, importer)
        return NOT_FOUND
