from vehicle_rental.address import Address


def make_address() -> Address:
    return Address("Lodz", "Aleja Politechniki", "20/4")


def test_set_city_new_value():
    address = make_address()
    address.city = "Bydgoszcz"
    assert address.city == "Bydgoszcz"


def test_set_city_empty_string_keeps_previous():
    address = make_address()
    previous = address.city
    address.city = ""
    assert address.city == previous


def test_set_street_new_value():
    address = make_address()
    address.street = "Wolczanska"
    assert address.street == "Wolczanska"


def test_set_street_empty_string_keeps_previous():
    address = make_address()
    previous = address.street
    address.street = ""
    assert address.street == previous


def test_set_number_new_value():
    address = make_address()
    address.number = "4/20"
    assert address.number == "4/20"


def test_set_number_empty_string_keeps_previous():
    address = make_address()
    previous = address.number
    address.number = ""
    assert address.number == previous


def test_info_format():
    assert make_address().info() == (
        " Address:\n City: Lodz, street: Aleja Politechniki, number: 20/4"
    )