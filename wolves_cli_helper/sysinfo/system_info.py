#!filepath: wolves_cli_helper/sysinfo/system_info.py
from __future__ import annotations

import os
import platform
import socket
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import psutil

from wolves_cli_helper import logs


@dataclass
class DiskInfo:
    kind: Optional[str] = None
    file_system: Optional[str] = None
    free_space: Optional[str] = None


@dataclass
class SystemInfo:
    """
    主机快照（一次性采集，不刷新）

    内存 / swap 单位：字节
    取不到的字符串字段为空串
    """

    system_name: str
    kernel_version: str
    os_version: str
    hostname: str
    cpu_cores: int
    cpu_virtual_cores: int
    total_memory: int
    used_memory: int
    total_swap: int
    used_swap: int
    disks: List[DiskInfo] = field(default_factory=list)

    @classmethod
    @logs.catch("system snapshot failed", log_time=True)
    def collect(cls) -> "SystemInfo":
        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()

        return cls(
            system_name=_system_name(),
            kernel_version=platform.release(),
            os_version=_os_version(),
            hostname=socket.gethostname(),
            cpu_cores=psutil.cpu_count(logical=False) or 0,
            cpu_virtual_cores=psutil.cpu_count(logical=True) or 0,
            total_memory=int(mem.total),
            used_memory=int(mem.used),
            total_swap=int(swap.total),
            used_swap=int(swap.used),
            disks=_collect_disks(),
        )

    def to_dict(self) -> Dict[str, str]:
        info = {
            "System Name": self.system_name,
            "System kernel version": self.kernel_version,
            "System OS version": self.os_version,
            "Hostname": self.hostname,
            "CPU Cores": str(self.cpu_cores),
            "CPU Virtual Cores": str(self.cpu_virtual_cores),
            "Total Memory": str(self.total_memory),
            "Used Memory": str(self.used_memory),
            "Total Swap": str(self.total_swap),
            "Used Swap": str(self.used_swap),
        }
        # 每块盘独立编号，避免多盘互相覆盖
        for i, disk in enumerate(self.disks):
            if disk.kind is not None:
                info[f"Disk {i} Type"] = disk.kind
            if disk.file_system is not None:
                info[f"Disk {i} File System"] = disk.file_system
            if disk.free_space is not None:
                info[f"Disk {i} Free Space"] = disk.free_space
        return info

    def display(self, console=None, style=None) -> None:
        from wolves_cli_helper.verbose.console import write_header_lines

        write_header_lines(self.to_dict(), console=console, style=style)


# -------------------------------------------------------------
# helpers
# -------------------------------------------------------------
def _os_release() -> Dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        return {}


def _system_name() -> str:
    """
    Linux: /etc/os-release 的 NAME（如 "Ubuntu"），取不到退回内核名
    其他平台: platform.system
    """
    if platform.system() == "Linux":
        return _os_release().get("NAME") or platform.system()
    return platform.system()


def _os_version() -> str:
    """
    Linux: /etc/os-release 的 VERSION_ID
    其他平台: platform.mac_ver / platform.version
    """
    system = platform.system()
    if system == "Linux":
        return _os_release().get("VERSION_ID", "")
    if system == "Darwin":
        return platform.mac_ver()[0]
    return platform.version()


def _disk_kind(device: str) -> str:
    """
    /sys/block/<dev>/queue/rotational: 0 → SSD, 1 → HDD
    非 Linux 或取不到 → Unknown
    """
    name = os.path.basename(device)
    if not name:
        return "Unknown"

    # 分区 → 整盘：sda1 → sda, nvme0n1p1 → nvme0n1
    candidates = [name, name.rstrip("0123456789")]
    if "p" in name and name.startswith(("nvme", "mmcblk")):
        candidates.append(name.rsplit("p", 1)[0])

    for cand in candidates:
        path = f"/sys/block/{cand}/queue/rotational"
        try:
            with open(path, "r", encoding="utf-8") as f:
                flag = f.read().strip()
        except OSError:
            continue
        if flag == "0":
            return "SSD"
        if flag == "1":
            return "HDD"
    return "Unknown"


def _collect_disks() -> List[DiskInfo]:
    disks: List[DiskInfo] = []
    for part in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (PermissionError, OSError) as e:
            logs.debug(f"[SystemInfo] skip {part.mountpoint}: {e}")
            continue

        disks.append(
            DiskInfo(
                kind=_disk_kind(part.device),
                file_system=part.fstype or None,
                free_space=str(usage.free),
            )
        )
    return disks
