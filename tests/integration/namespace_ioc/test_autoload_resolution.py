"""Integration tests for resolving namespaces from an autoloaded directory."""

import pytest

from namespace_ioc import IocContainer, MissingMethodError


@pytest.fixture
def app_directory(tmp_path):
    """Create a small application tree to autoload from."""
    http = tmp_path / "app" / "Http"
    http.mkdir(parents=True)
    services = tmp_path / "app" / "Services"
    services.mkdir()

    (services / "Mailer.py").write_text(
        "class Mailer:\n"
        "    def send(self, to):\n"
        "        return f'sent to {to}'\n"
    )
    (http / "UserController.py").write_text(
        "class UserController:\n"
        "    inject = ['App/Services/Mailer', 'Config']\n"
        "\n"
        "    def __init__(self, mailer_class, config):\n"
        "        self.mailer = mailer_class()\n"
        "        self.config = config\n"
        "\n"
        "    def invite(self):\n"
        "        return self.mailer.send(self.config['admin'])\n"
    )
    (http / "routes.py").write_text("ROUTES = ['/users']\n")
    return tmp_path / "app"


class TestAutoloadResolution:
    """Test autoload rule, module loader and instantiation working together."""

    def test_use_loads_class_from_file(self, app_directory):
        """Test that a namespace under the prefix resolves to the file's class."""
        container = IocContainer()
        container.autoload("App", str(app_directory))

        mailer_class = container.use("App/Services/Mailer")

        assert mailer_class.__name__ == "Mailer"
        assert mailer_class().send("ada") == "sent to ada"

    def test_autoloaded_module_is_cached(self, app_directory):
        """Test that repeated lookups return the same loaded class."""
        container = IocContainer()
        container.autoload("App", str(app_directory))

        assert container.use("App/Services/Mailer") is container.use("App/Services/Mailer")

    def test_module_without_default_export(self, app_directory):
        """Test that a module without a matching attribute is returned whole."""
        container = IocContainer()
        container.autoload("App", str(app_directory))

        assert container.use("App/Http/routes").ROUTES == ["/users"]

    def test_make_func_on_autoloaded_controller(self, app_directory):
        """Test the controller flow: autoload, inject, verify method."""
        container = IocContainer()
        container.autoload("App", str(app_directory))
        container.singleton("Config", lambda c: {"admin": "admin@example.com"})

        reference = container.make_func("App/Http/UserController.invite")

        assert reference.method == "invite"
        assert reference.bound()() == "sent to admin@example.com"

        with pytest.raises(MissingMethodError):
            container.make_func("App/Http/UserController.destroy")

    def test_alias_to_autoloaded_controller(self, app_directory):
        """Test that aliases may point into the autoloaded tree."""
        container = IocContainer()
        container.autoload("App", str(app_directory))
        container.singleton("Config", lambda c: {"admin": "root"})
        container.alias("Users", "App/Http/UserController")

        assert container.make_func("Users.invite").bound()() == "sent to root"

    def test_missing_file_propagates(self, app_directory):
        """Test that a missing file surfaces as ModuleNotFoundError without fallback."""
        container = IocContainer()
        container.autoload("App", str(app_directory))
        container.alias("App/Services/Missing", "Config")
        container.singleton("Config", lambda c: {})

        with pytest.raises(ModuleNotFoundError):
            container.use("App/Services/Missing")

    def test_binding_overrides_autoloaded_file(self, app_directory):
        """Test that an explicit binding shadows the file on disk."""
        container = IocContainer()
        container.autoload("App", str(app_directory))
        container.bind("App/Services/Mailer", lambda c: "fake mailer")

        assert container.use("App/Services/Mailer") == "fake mailer"
