# Tests for verifying the package skeleton is importable and documented.

import importlib
import importlib.resources
import pkgutil

import yaml

import docmerge


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert docmerge.__doc__ and docmerge.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(docmerge.__path__, docmerge.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_defaults_are_packaged() -> None:
    """The default configuration ships inside the package and is a mapping."""
    resource = importlib.resources.files("docmerge.config").joinpath("defaults.yml")
    assert resource.is_file()
    data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    assert isinstance(data, dict)
    assert data["schema_version"] == 1
    assert set(data) == {"schema_version", "extraction", "output", "logging"}


def test_subpackages_declare_public_api() -> None:
    """Every subpackage lists the names it exports and they resolve."""
    for module_info in pkgutil.iter_modules(docmerge.__path__, docmerge.__name__ + "."):
        if not module_info.ispkg:
            continue
        package = importlib.import_module(module_info.name)
        exported = getattr(package, "__all__", None)
        if exported is None:
            continue
        for name in exported:
            assert hasattr(package, name), f"{module_info.name} missing {name}"
