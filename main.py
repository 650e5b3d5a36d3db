import json
import logging
from datetime import date

from partscatalog.models.baseboard_models import MotherboardInfo
from partscatalog.models.computer_models import ComputerInfo
from partscatalog.models.cpu_models import CPUInfo
from partscatalog.models.gpu_models import GPUInfo
from partscatalog.models.memory_models import MemoryModuleInfo
from partscatalog.models.power_supply_models import PowerSupplyInfo
from partscatalog.models.storage_models import DiskInfo
from partscatalog.persistence.json_store import load_devices, save_devices
from partscatalog.simulation.power import adjust_max_clock, classify_cpu_power

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

cpu = CPUInfo(
    brand="AMD", model="Ryzen 7 5800X", core_count=8, thread_count=16,
    base_clock=3.8, max_clock=4.7, socket_type="AM4", condition="new",
    guarantee_end_date=date(2027, 1, 1), serial_number="CPU-001",
)
ram = MemoryModuleInfo(
    brand="Kingston", model="Fury Beast", capacity=32, frequency=3200,
    type="DDR4", supported_cpu="AMD", condition="new", serial_number="RAM-001",
)
disk = DiskInfo(
    brand="Samsung", model="980 Pro", capacity=1000, type="SSD", interface="NVMe",
    condition="used", warranty_period="5 years", serial_number="SSD-001",
)
gpu = GPUInfo(
    brand="NVIDIA", model="RTX 3070", memory_size=8, memory_type="GDDR6",
    core_clock=1500, boost_clock=1725, interface="PCIe 4.0", serial_number="GPU-001",
)
board = MotherboardInfo(
    brand="ASUS", model="TUF B550", socket_type="AM4", chipset="B550",
    ram_slots=4, max_ram=128, form_factor="ATX", serial_number="MB-001",
)
psu = PowerSupplyInfo(
    brand="Corsair", model="RM750", wattage=750, efficiency_rating="80+ Gold",
    form_factor="ATX", modular=True, serial_number="PSU-001",
)

computer = ComputerInfo(
    display_name="Workstation", name="Workstation", serial_number="PC-001",
    cpu=cpu, memory=ram, storage=disk, gpu=gpu, motherboard=board, power_supply=psu,
)
print(computer)

print("Max clock after adjustment:", adjust_max_clock(cpu))
print("CPU power:", classify_cpu_power(cpu))

for size in (100, 400, 600):
    result = disk.save_file(size)
    print(f"save({size}):", result.type.value, result.reason or "", disk.store)
print("delete(250):", disk.delete_file(250).type.value, disk.store)
print("clean():", disk.clean_cache().type.value, disk.store)

save_devices([computer], "computers.json")
catalog = load_devices("computers.json", ComputerInfo)
print(json.dumps(json.loads(catalog.model_dump_json()), indent=2))
