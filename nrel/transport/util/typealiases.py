from nrel.transport.model.driver.driver_kind import DriverKind

VehicleId = str
ModelName = str
PassengerName = str
DriverName = str
LicenseCategory = str

# one driver per kind, so the kind names the driver
DriverId = DriverKind
