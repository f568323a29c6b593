from appletshell.applet import Applet
from appletshell.pluginfactory import AppletFactory, applet_factory


class AlphaApplet(Applet):
    pass


class BetaApplet(Applet):
    pass


class DeltaApplet(Applet):
    pass


def test_generated_factory_creates_applet_with_parent():
    factory_cls = applet_factory(AlphaApplet)
    parent = Applet()
    applet = factory_cls().create(parent)
    assert isinstance(applet, AlphaApplet)
    assert applet.parent is parent


def test_generated_factory_name():
    assert applet_factory(BetaApplet).__name__ == "BetaAppletAppletFactory"


def test_create_default_parent_is_none():
    applet = applet_factory(BetaApplet)().create()
    assert isinstance(applet, BetaApplet)
    assert applet.parent is None


def test_unregistered_factory_creates_nothing():
    assert AppletFactory().create() is None


def test_first_registration_wins():
    factory = applet_factory(DeltaApplet)()
    factory.register_instance(BetaApplet)
    parent = Applet()
    created = factory.create(parent)
    assert type(created).__name__ == "DeltaApplet"
    assert created.parent is parent