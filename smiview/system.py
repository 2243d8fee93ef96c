"""Host information and privilege helpers."""

from __future__ import annotations

import subprocess
import sys
import time

_EXPLANATION = """
🔧 all-smi: System Monitoring Interface
============================================

This application monitors GPU, CPU, and memory usage on your system.

🔒 Administrator privileges are required because:
   • Access to hardware metrics requires the 'powermetrics' command
   • powermetrics needs elevated privileges to read low-level system data
   • This includes GPU utilization, power consumption, and thermal information

🛡️  Security Information:
   • all-smi only reads system metrics - it does not modify your system
   • The sudo access is used exclusively for running 'powermetrics'
   • No data is transmitted externally without your explicit configuration

📋 What will be monitored:
   • GPU: Utilization, memory usage, temperature, power consumption
   • CPU: Core utilization and performance metrics
   • Memory: System RAM usage and allocation
   • Storage: Disk usage and performance

To proceed, you need to enter your sudo password.
🔑 Requesting administrator privileges...
   (You may be prompted for your password)
"""

_FAILURE = """❌ Failed to acquire administrator privileges.

💡 Troubleshooting:
   • Make sure you entered the correct password
   • Ensure your user account has administrator privileges
   • Try running 'sudo -v' manually to test sudo access

   For remote monitoring without sudo, use:
   → all-smi view --hosts <url1> <url2>
"""

_GRANTED = """✅ Administrator privileges granted successfully.
   Starting system monitoring...
"""

_ALREADY = """
✅ Administrator privileges already available.
   Starting system monitoring...
"""


def _is_macos() -> bool:
    return sys.platform == "darwin"


def get_hostname() -> str:
    """Return the host name reported by the ``hostname`` command."""
    try:
        result = subprocess.run(["hostname"], capture_output=True, check=False)
    except OSError as exc:
        raise RuntimeError("Failed to execute hostname command") from exc
    return result.stdout.decode("utf-8", errors="replace").strip()


def has_sudo_privileges() -> bool:
    """Return True if sudo can be used without asking for a password."""
    try:
        result = subprocess.run(
            ["sudo", "-n", "-v"], capture_output=True, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def calculate_adaptive_interval(node_count: int) -> int:
    """Return the polling interval in seconds suited to the number of nodes."""
    if node_count <= 10:
        return 2
    if node_count <= 50:
        return 3
    if node_count <= 100:
        return 4
    if node_count <= 200:
        return 5
    return 6


def _request_sudo_with_explanation(pause_when_ready: bool) -> bool:
    if has_sudo_privileges():
        print(_ALREADY)
        if pause_when_ready:
            # Give the user a moment to read the message before the screen is cleared.
            time.sleep(1.5)
            return False
        return True

    print(_EXPLANATION)
    sys.stdout.flush()

    try:
        status = subprocess.run(["sudo", "-v"], check=False)
    except OSError as exc:
        raise RuntimeError("Failed to execute sudo command") from exc

    if status.returncode != 0:
        print(_FAILURE)
        raise SystemExit(1)

    print(_GRANTED)
    return True


def ensure_sudo_permissions() -> None:
    """Make sure administrator privileges are available where the platform needs them."""
    if _is_macos():
        sys.stdout.flush()
        sys.stderr.flush()
        _request_sudo_with_explanation(pause_when_ready=True)
    else:
        print(
            "Note: This platform may not require sudo for hardware monitoring.",
            file=sys.stderr,
        )


def ensure_sudo_permissions_with_fallback() -> bool:
    """Like :func:`ensure_sudo_permissions`, returning True once privileges are held."""
    if _is_macos():
        return _request_sudo_with_explanation(pause_when_ready=False)
    return True