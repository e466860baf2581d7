#!filepath: tests/sysinfo/test_system_info.py
from collections import namedtuple

import pytest

from wolves_cli_helper import DiskInfo, SystemInfo
from wolves_cli_helper.sysinfo import system_info as si


EXPECTED_KEYS = [
    "System Name",
    "System kernel version",
    "System OS version",
    "Hostname",
    "CPU Cores",
    "CPU Virtual Cores",
    "Total Memory",
    "Used Memory",
    "Total Swap",
    "Used Swap",
]


def test_system_info_collect():
    info = SystemInfo.collect()

    assert info.system_name
    assert info.kernel_version
    assert info.hostname
    assert isinstance(info.os_version, str)
    assert info.cpu_cores >= 0
    assert info.cpu_virtual_cores > 0
    assert info.total_memory > 0
    assert info.used_memory <= info.total_memory
    assert info.total_swap >= info.used_swap
    for disk in info.disks:
        assert disk.kind in ("SSD", "HDD", "Unknown")
        assert disk.free_space is None or disk.free_space.isdigit()


def test_to_dict_keys():
    d = SystemInfo.collect().to_dict()

    for key in EXPECTED_KEYS:
        assert key in d
    assert all(isinstance(v, str) for v in d.values())


# ------------------------------------------------------------------
# 固定数据（mock psutil）
# ------------------------------------------------------------------

Mem = namedtuple("Mem", "total used")
Part = namedtuple("Part", "device mountpoint fstype")
Usage = namedtuple("Usage", "free")


@pytest.fixture
def fake_host(monkeypatch):
    monkeypatch.setattr(si.psutil, "virtual_memory", lambda: Mem(16_000, 4_000))
    monkeypatch.setattr(si.psutil, "swap_memory", lambda: Mem(2_000, 0))
    monkeypatch.setattr(
        si.psutil, "cpu_count", lambda logical=True: 8 if logical else None
    )
    monkeypatch.setattr(
        si.psutil,
        "disk_partitions",
        lambda all=False: [
            Part("/dev/sda1", "/", "ext4"),
            Part("/dev/sdb1", "/secret", "xfs"),
            Part("/dev/nvme0n1p2", "/data", ""),
        ],
    )

    def _usage(mountpoint):
        if mountpoint == "/secret":
            raise PermissionError("denied")
        return Usage(123_456)

    monkeypatch.setattr(si.psutil, "disk_usage", _usage)
    monkeypatch.setattr(si, "_disk_kind", lambda device: "SSD" if "nvme" in device else "HDD")
    monkeypatch.setattr(si.socket, "gethostname", lambda: "wolf-01")


def test_collect_with_fake_host(fake_host):
    info = SystemInfo.collect()

    assert info.hostname == "wolf-01"
    assert info.cpu_cores == 0
    assert info.cpu_virtual_cores == 8
    assert info.total_memory == 16_000
    assert info.used_memory == 4_000
    assert info.total_swap == 2_000
    assert info.used_swap == 0

    # /secret 无权限 → 跳过
    assert info.disks == [
        DiskInfo(kind="HDD", file_system="ext4", free_space="123456"),
        DiskInfo(kind="SSD", file_system=None, free_space="123456"),
    ]


def test_to_dict_numbers_each_disk(fake_host):
    d = SystemInfo.collect().to_dict()

    assert d["Hostname"] == "wolf-01"
    assert d["CPU Virtual Cores"] == "8"
    assert d["Total Memory"] == "16000"
    assert d["Disk 0 Type"] == "HDD"
    assert d["Disk 0 File System"] == "ext4"
    assert d["Disk 0 Free Space"] == "123456"
    assert d["Disk 1 Type"] == "SSD"
    assert "Disk 1 File System" not in d
    assert "Disk 2 Type" not in d


def test_display_renders_header_lines(fake_host, console):
    SystemInfo.collect().display(console=console)

    out = console.file.getvalue()
    assert "Hostname" in out
    assert "wolf-01" in out
    assert "Disk 1 Free Space" in out


def test_disk_kind_unknown_device():
    assert si._disk_kind("") == "Unknown"
    assert si._disk_kind("/dev/definitely-not-a-disk-0") == "Unknown"


# ------------------------------------------------------------------
# System Name / OS version（os-release）
# ------------------------------------------------------------------

def test_linux_system_name_from_os_release(monkeypatch):
    monkeypatch.setattr(si.platform, "system", lambda: "Linux")
    monkeypatch.setattr(
        si.platform,
        "freedesktop_os_release",
        lambda: {"NAME": "Ubuntu", "VERSION_ID": "22.04"},
    )

    assert si._system_name() == "Ubuntu"
    assert si._os_version() == "22.04"


def test_linux_without_os_release_falls_back(monkeypatch):
    def _missing():
        raise OSError("no os-release")

    monkeypatch.setattr(si.platform, "system", lambda: "Linux")
    monkeypatch.setattr(si.platform, "freedesktop_os_release", _missing)

    assert si._system_name() == "Linux"
    assert si._os_version() == ""


def test_collect_reports_distro_name(fake_host, monkeypatch):
    monkeypatch.setattr(si.platform, "system", lambda: "Linux")
    monkeypatch.setattr(
        si.platform,
        "freedesktop_os_release",
        lambda: {"NAME": "Debian GNU/Linux", "VERSION_ID": "12"},
    )

    d = SystemInfo.collect().to_dict()

    assert d["System Name"] == "Debian GNU/Linux"
    assert d["System OS version"] == "12"


def test_disk_info_kind_field():
    disk = DiskInfo(kind="SSD", file_system="ext4", free_space="1")

    assert disk.kind == "SSD"
