"""Driving scripts for the pattern demos.

Each function builds a small scene, invokes the pattern's operations and lets
the objects narrate through the given output port. Importing this module
registers every demo with the registry in ``application.decorators``.
"""
from gofpatterns.application.decorators import demo
from gofpatterns.application.dto import PatternCategory
from gofpatterns.config.schemas.demo_schema import DemoConfig
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.domain.behavioural.command import (
    Application,
    CopyCommand,
    CutCommand,
    Editor,
    PasteCommand,
)
from gofpatterns.domain.behavioural.strategy import (
    DeskDataStrategy,
    ExtractDataService,
    RoomDataStrategy,
    SensorDataStrategy,
)
from gofpatterns.domain.creational.builder import FastFoodWorker, KFCRestaurant, McDonaldsRestaurant
from gofpatterns.domain.creational.factory_method import KafiToys, SimbaSmobyToys, client_code
from gofpatterns.domain.creational.singleton import Repository, check_singleton
from gofpatterns.domain.structural.adapter import (
    EUPlug,
    EUUKOneWayPlugAdapter,
    UKEUOneWayPlugAdapter,
    UKEUTwoWayPlugAdapter,
    UKPlug,
)
from gofpatterns.domain.structural.bridge import TV, Radio, Remote
from gofpatterns.domain.structural.decorator import (
    Human,
    ShirtDecorator,
    ShortsDecorator,
    SocksDecorator,
    TrousersDecorator,
)


@demo("adapter", PatternCategory.STRUCTURAL, "UK and EU plugs made to fit each other's sockets")
def run_adapter_demo(output: OutputPort, config: DemoConfig) -> None:
    """Provides a unified interface that allows objects with incompatible
    interfaces to collaborate."""
    my_uk_plug = UKPlug(output)
    my_eu_plug = EUPlug(output)

    UKEUOneWayPlugAdapter(my_eu_plug, output).get_eu_plug()
    EUUKOneWayPlugAdapter(my_uk_plug, output).get_uk_plug()

    two_way_adapter = UKEUTwoWayPlugAdapter(my_uk_plug, my_eu_plug, output)
    two_way_adapter.get_uk_plug()
    two_way_adapter.get_eu_plug()


@demo("bridge", PatternCategory.STRUCTURAL, "One remote abstraction driving radios and TVs")
def run_bridge_demo(output: OutputPort, config: DemoConfig) -> None:
    """Splits a set of closely related classes into two separate hierarchies,
    abstraction and implementation, which can be developed independently of
    each other."""
    bounds = config.level_bounds
    radio_remote = Remote(Radio(), output, bounds.min_level, bounds.max_level)
    tv_remote = Remote(TV(), output, bounds.min_level, bounds.max_level)

    for _ in range(4):
        radio_remote.volume_up()
    for _ in range(3):
        radio_remote.volume_down()
    for _ in range(5):
        radio_remote.toggle_power()
    for _ in range(5):
        radio_remote.channel_up()
    for _ in range(2):
        radio_remote.channel_down()

    for _ in range(4):
        tv_remote.volume_up()
    tv_remote.mute()
    for _ in range(3):
        tv_remote.toggle_power()
    for _ in range(2):
        tv_remote.volume_up()
    tv_remote.mute()
    tv_remote.volume_up()


@demo("builder", PatternCategory.CREATIONAL, "Restaurants building burgers step by step")
def run_builder_demo(output: OutputPort, config: DemoConfig) -> None:
    """Constructs complex objects step by step, producing different
    representations of an object with the same construction code."""
    leeds_mcdonalds = McDonaldsRestaurant()
    wakefield_kfc = KFCRestaurant()
    huddersfield_kfc = KFCRestaurant()

    john_doe = FastFoodWorker(leeds_mcdonalds)
    jane_doe = FastFoodWorker(wakefield_kfc)
    harry_doe = FastFoodWorker(huddersfield_kfc)

    output.write("Standard basic McDonalds burger:")
    john_doe.build_minimal_burger()
    leeds_mcdonalds.get_burger().list_parts(output)

    output.write("Standard full McDonalds burger:")
    john_doe.build_full_burger()
    leeds_mcdonalds.get_burger().list_parts(output)

    # The builder can be used without a director
    output.write("Custom McDonalds burger:")
    leeds_mcdonalds.add_bun()
    leeds_mcdonalds.add_burger()
    leeds_mcdonalds.get_burger().list_parts(output)

    jane_doe.change_restaurant(huddersfield_kfc)
    output.write("Standard basic KFC burger:")
    jane_doe.build_minimal_burger()
    huddersfield_kfc.get_burger().list_parts(output)

    output.write("Standard full KFC burger:")
    harry_doe.build_full_burger()
    huddersfield_kfc.get_burger().list_parts(output)

    output.write("Custom KFC burger:")
    wakefield_kfc.add_bun()
    wakefield_kfc.add_burger()
    wakefield_kfc.get_burger().list_parts(output)


def _report_editors(output: OutputPort, app: Application, first: Editor, second: Editor) -> None:
    output.write(f"Editor 1 Text: {first.get_text()}")
    output.write(f"Editor 2 Text: {second.get_text()}")
    output.write(f"Application Command History: {app.history!r}")


@demo("command", PatternCategory.BEHAVIOURAL, "Copy, cut, paste and undo between two editors")
def run_command_demo(output: OutputPort, config: DemoConfig) -> None:
    """Turns a request into a stand-alone object that contains all information
    about the request, which lets you queue requests and support undoable
    operations."""
    editor1 = Editor()
    editor2 = Editor()
    application = Application([editor1, editor2])
    application.active_editor = editor1

    editor1.set_text(config.editor_texts[0])
    editor2.set_text(config.editor_texts[1])

    application.execute_command(CopyCommand(application, editor1))
    _report_editors(output, application, editor1, editor2)
    application.execute_command(PasteCommand(application, editor2))
    _report_editors(output, application, editor1, editor2)

    application.execute_command(CutCommand(application, editor1))
    _report_editors(output, application, editor1, editor2)
    application.execute_command(PasteCommand(application, editor2))
    _report_editors(output, application, editor1, editor2)

    application.copy()
    _report_editors(output, application, editor1, editor2)

    application.active_editor = editor2
    application.paste()
    _report_editors(output, application, editor1, editor2)

    editor2.set_text("Hello World!")
    application.undo()
    _report_editors(output, application, editor1, editor2)


@demo("decorator", PatternCategory.STRUCTURAL, "Getting dressed one wrapper at a time")
def run_decorator_demo(output: OutputPort, config: DemoConfig) -> None:
    """Attaches new behaviors to objects by placing these objects inside
    special wrapper objects that contain the behaviors."""
    me_naked = Human(output)
    me_with_only_shorts_on = ShortsDecorator(me_naked)
    me_with_shorts_and_shirt_on = ShirtDecorator(me_with_only_shorts_on)
    me_with_shorts_trousers_and_shirt_on = TrousersDecorator(me_with_shorts_and_shirt_on)

    outfits = [
        me_naked,
        me_with_only_shorts_on,
        TrousersDecorator(me_naked),
        ShirtDecorator(me_naked),
        SocksDecorator(me_naked),
        TrousersDecorator(me_with_only_shorts_on),
        me_with_shorts_and_shirt_on,
        me_with_shorts_trousers_and_shirt_on,
        SocksDecorator(me_with_shorts_trousers_and_shirt_on),
    ]
    for index, outfit in enumerate(outfits):
        if index:
            output.write("")
        outfit.put_on()


@demo("factory-method", PatternCategory.CREATIONAL, "Toy factories choosing which toy to make")
def run_factory_method_demo(output: OutputPort, config: DemoConfig) -> None:
    """Provides an interface for creating objects in a superclass, but allows
    subclasses to alter the type of objects that will be created."""
    output.write("App: Launched with the KafiToys.")
    client_code(KafiToys(), output)
    output.write("")

    output.write("App: Launched with the SimbaSmobyToys.")
    client_code(SimbaSmobyToys(), output)


@demo("singleton", PatternCategory.CREATIONAL, "One repository instance per process")
def run_singleton_demo(output: OutputPort, config: DemoConfig) -> None:
    """Ensures that a class has only one instance, while providing a global
    access point to this instance."""
    repository_instance_one = Repository.get_instance()
    repository_instance_two = Repository.get_instance()
    check_singleton(repository_instance_one, repository_instance_two, output)


@demo("strategy", PatternCategory.BEHAVIOURAL, "Interchangeable data extraction algorithms")
def run_strategy_demo(output: OutputPort, config: DemoConfig) -> None:
    """Defines a family of algorithms, puts each of them into a separate
    class, and makes their objects interchangeable."""
    extract_data_service = ExtractDataService(RoomDataStrategy(), output)
    output.write("Client: Strategy is set to RoomDataStrategy.")
    extract_data_service.do_some_business_logic(config.strategy_sample)
    output.write("")

    output.write("Client: Strategy is set to DeskDataStrategy.")
    extract_data_service.set_strategy(DeskDataStrategy())
    extract_data_service.do_some_business_logic(config.strategy_sample)
    output.write("")

    output.write("Client: Strategy is set to SensorDataStrategy.")
    extract_data_service.set_strategy(SensorDataStrategy())
    extract_data_service.do_some_business_logic(config.strategy_sample)
