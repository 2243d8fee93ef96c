"""Mount-point filtering that hides system and container bind mounts."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

_MACOS_PREFIXES = (
    "/System/Volumes/",
    "/Library/",
    "/Applications/",
    "/System/",
    "/private/",
    "/Volumes/VM/",
    "/Network/",
    "/var/lib/docker/",
)
_MACOS_EXACT = ("/Volumes", "/var/lib/docker", "/Users/Shared", "/cores")

_LINUX_PREFIXES = (
    "/dev/",
    "/proc/",
    "/sys/",
    "/run/",
    "/snap/",
    "/usr/",
    "/var/log/",
    "/var/cache/",
    "/var/lib/",
    "/var/tmp/",
    "/var/spool/",
    "/var/lib/docker/",
)
_LINUX_EXACT = (
    "/var/lib/docker",
    "/boot",
    "/boot/efi",
    "/tmp",
    "/bin",
    "/sbin",
    "/etc",
    "/lib",
    "/lib64",
    "/opt",
    "/media",
    "/mnt",
    "/root",
    "/srv",
)

_COMMON_PREFIXES = (
    "/tmp/",
    "/var/tmp/",
    "/var/lib/docker/",
    "/var/lib/containerd/",
)
_COMMON_EXACT = ("/var/lib/docker", "/var/lib/containerd")

_DOCKER_FILE_MOUNTS = (
    "/etc/hosts",
    "/etc/hostname",
    "/etc/resolv.conf",
    "/etc/timezone",
    "/etc/localtime",
)

_PRIMARY_MOUNTS = (
    "/",
    "/home",
    "/home/work",
    "/data",
    "/mnt",
    "/opt",
    "/var",
    "/opt/backend.ai",
)

_DOCKER_FILE_PATTERNS = (
    "/usr/bin/",
    "/usr/lib/",
    "/opt/kernel/",
    "/etc/backend.ai/jail/plugins/",
    ".so",
    ".json",
    ".py",
    ".sh",
    ".md",
    "docker-init",
    "nvidia-smi",
    "cuda-mps",
)

_FILE_EXTENSIONS = (".so", ".json", ".py", ".sh", ".md")

_OVERLAY_FILESYSTEMS = frozenset({"overlay", "overlay2"})

# A device mounted more often than this is assumed to carry container bind mounts.
_BIND_MOUNT_THRESHOLD = 5


class DiskFilter:
    """Decides whether a mount point is worth showing to the user."""

    def __init__(self) -> None:
        self.excluded_prefixes = frozenset(
            _MACOS_PREFIXES + _LINUX_PREFIXES + _COMMON_PREFIXES
        )
        self.excluded_exact = frozenset(_MACOS_EXACT + _LINUX_EXACT + _COMMON_EXACT)
        self.docker_file_mounts = frozenset(_DOCKER_FILE_MOUNTS)

    def should_include(self, mount_point: str) -> bool:
        """Return False for system directories and known container file mounts."""
        if mount_point in self.excluded_exact:
            return False
        if mount_point in self.docker_file_mounts:
            return False
        return not any(mount_point.startswith(p) for p in self.excluded_prefixes)


@dataclass(frozen=True)
class DiskEntry:
    """One mounted filesystem as reported by the operating system."""

    name: str
    mount_point: str
    file_system: str = ""


_DEFAULT_FILTER = DiskFilter()


def is_primary_mount_point(mount_point: str) -> bool:
    """Return True for directory mounts worth keeping on a bind-mount-heavy device."""
    if mount_point in _PRIMARY_MOUNTS:
        return True
    if any(pattern in mount_point for pattern in _DOCKER_FILE_PATTERNS):
        return False
    if mount_point.endswith("/") and any(
        mount_point.startswith(primary) for primary in _PRIMARY_MOUNTS
    ):
        return True
    if mount_point.endswith(_FILE_EXTENSIONS):
        return False
    return mount_point.endswith("/")


def filter_docker_aware_disks(disks: Iterable[DiskEntry]) -> list[DiskEntry]:
    """Return the disks worth displaying, dropping container bind mounts."""
    disks = list(disks)
    by_device: dict[str, list[DiskEntry]] = defaultdict(list)
    for disk in disks:
        if _DEFAULT_FILTER.should_include(disk.mount_point):
            by_device[disk.name].append(disk)

    filtered: list[DiskEntry] = []
    for device_disks in by_device.values():
        if len(device_disks) > _BIND_MOUNT_THRESHOLD:
            filtered.extend(
                d for d in device_disks if is_primary_mount_point(d.mount_point)
            )
        else:
            filtered.extend(device_disks)

    # Container root filesystems are kept even when their device looked like bind mounts.
    for disk in disks:
        if (
            disk.file_system in _OVERLAY_FILESYSTEMS
            and _DEFAULT_FILTER.should_include(disk.mount_point)
            and not any(d.mount_point == disk.mount_point for d in filtered)
        ):
            filtered.append(disk)

    return filtered