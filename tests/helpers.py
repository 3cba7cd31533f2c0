"""Snapshot data and process status texts shared by the nscaps tests.

The snapshot models this user namespace hierarchy (owner UIDs in
parentheses) together with a few non-user namespaces and processes::

    user U0 (0) ............ PID 1 (euid 0), PID 100 (euid 1000), PID 400 (euid ?)
    ├── net N0
    ├── user U1 (1000) ..... PID 200 (euid 1000)
    │   ├── net N1
    │   ├── user U2 (1000)
    │   │   ├── net N2
    │   │   └── user U5 (0)
    │   └── user U3 (1001)
    │       ├── net N3
    │       └── user U6 (1000)
    └── user U4 (1000) ..... PID 300 (euid 1000)
        └── net N4

PID 300 records its capabilities in the snapshot; PID 500 has no known user
namespace.
"""

from __future__ import annotations

from typing import Any

U0, U1, U2, U3, U4, U5, U6 = (
    4026531837, 4026532342, 4026532400, 4026532500, 4026532600, 4026532450, 4026532550,
)
N0, N1, N2, N3, N4 = 4026531905, 4026532350, 4026532410, 4026532510, 4026532610

SNAPSHOT_DATA: dict[str, Any] = {
    "namespaces": [
        {"id": U0, "type": "user", "owner_uid": 0, "leaders": [1]},
        {"id": U1, "type": "user", "parent": U0, "owner_uid": 1000, "leaders": [200]},
        {"id": U2, "type": "user", "parent": U1, "owner_uid": 1000},
        {"id": U3, "type": "user", "parent": f"user:[{U1}]", "owner_uid": 1001},
        {"id": U4, "type": "user", "parent": U0, "owner_uid": 1000, "leaders": [300]},
        {"id": U5, "type": "user", "parent": U2, "owner_uid": 0},
        {"id": U6, "type": "user", "parent": U3, "owner_uid": 1000},
        {"id": N0, "type": "net", "owner": U0, "leaders": [1]},
        {"id": N1, "type": "net", "owner": U1},
        {"id": N2, "type": "net", "owner": U2},
        {"id": N3, "type": "net", "owner": U3},
        {"id": N4, "type": "net", "owner": U4},
    ],
    "processes": [
        {"pid": 1, "name": "systemd", "euid": 0,
         "namespaces": {"user": U0, "net": N0}},
        {"pid": 100, "name": "bash", "ppid": 1, "euid": 1000,
         "namespaces": {"user": U0, "net": N0}},
        {"pid": 200, "name": "unshare", "ppid": 100, "euid": 1000,
         "namespaces": {"user": U1, "net": N1}},
        {"pid": 300, "name": "sleep", "ppid": 100, "euid": 1000,
         "namespaces": {"user": f"user:[{U4}]", "net": N4},
         "capabilities": ["cap_kill", "cap_chown"]},
        {"pid": 400, "name": "zombie", "ppid": 1,
         "namespaces": {"user": U0, "net": N0}},
        {"pid": 500, "name": "ghost", "ppid": 1,
         "namespaces": {"net": N0}},
    ],
}

GOOD_STATUS = (
    "Name:\tunshare\n"
    "Umask:\t0022\n"
    "State:\tS (sleeping)\n"
    "Pid:\t200\n"
    "PPid:\t100\n"
    "Uid:\t1000\t1000\t1000\t1000\n"
    "Gid:\t1000\t1000\t1000\t1000\n"
    "CapInh:\t0000000000000000\n"
    "CapPrm:\t000001ffffffffff\n"
    "CapEff:\t0000003fffffffff\n"
    "CapBnd:\t000001ffffffffff\n"
    "CapAmb:\t0000000000000000\n"
)


