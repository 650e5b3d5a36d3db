import pytest

from partscatalog.models.computer_models import ComputerInfo
from partscatalog.models.cooler_models import CoolerInfo


@pytest.fixture
def computer(sample_cpu, sample_ram, sample_disk, sample_gpu, sample_motherboard, sample_psu):
    return ComputerInfo(
        display_name="Office PC", name="Office PC", serial_number="PC-123",
        cpu=sample_cpu, memory=sample_ram, storage=sample_disk, gpu=sample_gpu,
        motherboard=sample_motherboard, power_supply=sample_psu,
    )


class TestComputerInfo:
    """Tests for the assembled system record."""

    def test_default_cooler_attached(self, computer, sample_cpu, sample_gpu, sample_ram):
        cooler = computer.cooler

        assert cooler.manufacturer == "CoolerMaster"
        assert cooler.model == "Hyper 212"
        assert cooler.serial_number == "PC-123_Cooler"
        assert cooler.cpu is sample_cpu
        assert cooler.gpu is sample_gpu
        assert cooler.memory is sample_ram

    def test_given_cooler_kept(self, sample_cpu, sample_ram, sample_motherboard, sample_psu):
        cooler = CoolerInfo(manufacturer="Noctua", model="NH-D15")

        computer = ComputerInfo(
            cpu=sample_cpu, memory=sample_ram, motherboard=sample_motherboard,
            power_supply=sample_psu, cooler=cooler,
        )

        assert computer.cooler is cooler
        assert cooler.cpu is None

    def test_cooling_power(self, computer):
        # (3.6 * 12 * 10 + 1320 * 0.1 + 3200 * 16 * 0.05) * 0.8
        assert computer.cooler.cooling_power == pytest.approx(2499.2)

    def test_get_info(self, computer):
        lines = computer.get_info().splitlines()

        assert lines == [
            "Name: Office PC",
            "Serial number: PC-123",
            "CPU: Intel Core i7-12700K",
            "RAM: Kingston Fury Beast",
            "Storage: Seagate Barracuda",
            "GPU: NVIDIA RTX 3060",
            "Motherboard: MSI PRO Z690-A",
            "Power supply: Corsair RM850x",
            f"Cooler: CoolerMaster Hyper 212, Cooling power: {computer.cooler.cooling_power}W",
        ]

    def test_get_info_without_optional_parts(
        self, sample_cpu, sample_ram, sample_motherboard, sample_psu
    ):
        computer = ComputerInfo(
            name="Minimal", serial_number="PC-2", cpu=sample_cpu, memory=sample_ram,
            motherboard=sample_motherboard, power_supply=sample_psu,
        )

        info = computer.get_info()

        assert "Storage:" not in info
        assert "GPU:" not in info
        assert computer.cooler.gpu is None
