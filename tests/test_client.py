import pytest

from vehicle_rental.address import Address
from vehicle_rental.client import Client
from vehicle_rental.client_types import Bronze, Default, Diamond, Gold, Platinum, Silver


class _StubRent:
    def __init__(self, label: str) -> None:
        self.label = label

    def info(self) -> str:
        return f"Rent {self.label}"


@pytest.fixture
def address():
    return Address("Lodz", "Aleja Politechniki", "20/4")


@pytest.fixture
def client(address):
    return Client("Jan", "Kowal", "2468013579", address, Default())


def test_parameter_constructor(client, address):
    assert client.first_name == "Jan"
    assert client.last_name == "Kowal"
    assert client.personal_id == "2468013579"
    assert client.address is address


def test_set_first_name_new_value(client):
    client.first_name = "Janusz"
    assert client.first_name == "Janusz"


def test_set_first_name_empty_string(client):
    previous = client.first_name
    client.first_name = ""
    assert client.first_name == previous


def test_set_last_name_new_value(client):
    client.last_name = "Nowak"
    assert client.last_name == "Nowak"


def test_set_last_name_empty_string(client):
    previous = client.last_name
    client.last_name = ""
    assert client.last_name == previous


def test_set_address_valid(client):
    other = Address("Gniezno", "Promenada", "4/20")
    client.address = other
    assert client.address is other


def test_set_address_none_keeps_previous(client):
    previous = client.address
    client.address = None
    assert client.address is previous


def test_set_client_type_none_keeps_previous(client):
    client.client_type = None
    assert client.client_type.info() == "Default"


def test_add_rent(client):
    rent = _StubRent("1")
    client.add_rent(rent)
    assert len(client.current_rents) == 1
    assert client.current_rents[0] is rent


def test_remove_rent(client):
    first, second = _StubRent("1"), _StubRent("2")
    client.add_rent(first)
    client.add_rent(second)
    client.remove_rent(first)
    assert client.current_rents == [second]


@pytest.mark.parametrize(
    "client_type, max_vehicles, discounts",
    [
        (Default(), 1, {100: 100}),
        (Bronze(), 2, {100: 97}),
        (Silver(), 3, {100: 94}),
        (Gold(), 4, {100: 95}),
        (Platinum(), 5, {100: 90}),
        (Diamond(), 10, {100: 90, 200: 160, 300: 210, 600: 360}),
    ],
)
def test_client_type_behaviour(address, client_type, max_vehicles, discounts):
    client = Client("Jan", "Kowal", "2468013579", address, client_type)
    assert client.max_vehicles() == max_vehicles
    for price, expected in discounts.items():
        assert client.apply_discount(price) == pytest.approx(expected)


def test_info_without_rents(client):
    assert client.info() == (
        "Client:\n First name: Jan, last name: Kowal, personal ID: 2468013579"
        " Address:\n City: Lodz, street: Aleja Politechniki, number: 20/4"
        "\nNo current rentals.\nClient type: Default"
    )


def test_info_with_rents_and_no_address():
    client = Client("Jan", "Kowal", "1", None, Default())
    client.add_rent(_StubRent("A"))
    assert client.info() == (
        "Client:\n First name: Jan, last name: Kowal, personal ID: 1"
        "\nCurrent rentals:\nRent A\n\nClient type: Default"
    )


def test_missing_client_type_raises():
    client = Client("Jan", "Kowal", "1", None, None)
    with pytest.raises(ValueError):
        client.apply_discount(100)