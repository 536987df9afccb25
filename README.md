# vehicle-rental

A small in-memory model of a vehicle rental office. It keeps clients, vehicles
and rentals in repositories. Rental prices depend on the kind of vehicle, and
discounts depend on the client's tier.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
vehicle-rental
```

The command creates a `StorageContainer` and fills it with sample data a
second time, so each repository holds two sample entries. It prints the
reports of the client, vehicle and rent repositories. It then opens one more
one-day rental for the first client and the first vehicle and prints the
three reports again. The only option is `-h`/`--help`.

## Library overview

- `vehicle_rental.address.Address(city, street, number)`: the properties
  `city`, `street` and `number`, and `info()`. Assigning an empty string to a
  property leaves its value unchanged.
- `vehicle_rental.vehicles`:
  - `Vehicle(plate_number, base_price)` has the properties `plate_number`,
    `base_price` and `rented`. An empty plate number is ignored.
  - `Bicycle` is priced at its base price.
  - `MotorVehicle(plate_number, base_price, engine_displacement)` uses a
    factor of 1.0 below 1000, a factor that rises linearly from 1.0 to 1.5
    between 1000 and 2000, and 1.5 above that.
  - `Moped` is priced like any motor vehicle.
  - `Car(plate_number, base_price, engine_displacement, segment)` multiplies
    the motor-vehicle price by the factor of its `SegmentType`: A 1.0, B 1.1,
    C 1.2, D 1.3, E 1.5.

  Every vehicle has `actual_rental_price()` and `info()`.
- `vehicle_rental.client_types`: the tiers `Default`, `Bronze`, `Silver`,
  `Gold`, `Platinum` and `Diamond`, all derived from the abstract
  `ClientType`. Each has `max_vehicles()`, `apply_discount(price)` and
  `info()`.

  | Tier     | max_vehicles | apply_discount(price)                          |
  |----------|--------------|------------------------------------------------|
  | Default  | 1            | price                                          |
  | Bronze   | 2            | price - 3                                      |
  | Silver   | 3            | price - 6                                      |
  | Gold     | 4            | price × 0.95                                   |
  | Platinum | 5            | price × 0.90                                   |
  | Diamond  | 10           | ×0.90 up to 125, ×0.80 up to 250, ×0.70 up to 500, ×0.60 above |

- `vehicle_rental.client.Client(first_name, last_name, personal_id, address, client_type)`:
  - It keeps a list of current rents through `add_rent(rent)`,
    `remove_rent(rent)` and the `current_rents` property, which returns a
    copy.
  - `max_vehicles()` and `apply_discount(price)` are passed on to the
    client's tier. They raise `ValueError` when the client has no tier.
  - Assigning `None` to `address` or `client_type` is ignored, and so is
    assigning an empty string to a name.
- `vehicle_rental.rent.Rent(rent_id, begin_time, end_time, client, vehicle)`:
  - When it is created it marks the vehicle as rented. A `None` begin time
    means the current time.
  - `rent_days()` counts the days started. It returns 0 if the rent has not
    ended or lasted under a minute.
  - `end_rent(end_time=None)` closes the rent. It computes `rent_cost` as days
    × the vehicle's base price, frees the vehicle and removes the rent from
    the client's current rents.
  - The client is held by weak reference.
- `vehicle_rental.repositories.Repository`: an ordered collection with
  `get(index)`, `add(item)`, `remove(item)`, `report()`, `size()`,
  `find_by(predicate)` and `find_all()`.
  - `get` returns `None` for an index out of range.
  - `add` and `remove` ignore `None`.
  - `remove` drops every occurrence of that very object.
  - The repository also supports `len()` and iteration.
- `vehicle_rental.storage.StorageContainer`: holds the repositories
  `client_repository`, `vehicle_repository` and `rent_repository`. They are
  filled by `initialize_test_data()` when the container is created, with one
  client, one vehicle and a one-day rent.

```python
from datetime import datetime, timedelta

from vehicle_rental.address import Address
from vehicle_rental.client import Client
from vehicle_rental.client_types import Gold
from vehicle_rental.rent import Rent
from vehicle_rental.vehicles import Vehicle

client = Client("Jan", "Kowal", "1", Address("Lodz", "Aleja Politechniki", "20/4"), Gold())
vehicle = Vehicle("XX 00000", 100)
start = datetime.now()
rent = Rent(1, start, None, client, vehicle)
client.add_rent(rent)
rent.end_rent(start + timedelta(hours=24))
print(rent.rent_days())                       # 2
print(client.apply_discount(rent.rent_cost))  # 190.0
```

## Limitations

- Everything lives in memory. Nothing is saved to or loaded from disk or a
  database.
- `max_vehicles()` is informational only. Neither `Rent` nor the
  repositories stop a client from renting more vehicles than that, or a
  vehicle from being rented twice.
- The rent cost is computed from the vehicle's base price. It does not use
  `actual_rental_price()`, and the tier discount is not applied automatically.