"""
Demo input for callers that want something to run against.

One DNS query plus nine HTTP transfers whose sizes keep growing, so the
HTTP flow trips the increasing run rule with default settings.
"""

SAMPLE_LOG = """\
[2025-11-04 09:00:12] SRC=192.168.10.22 DST=8.8.8.8 PROTO=DNS SIZE=84
[2025-11-04 09:00:13] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=512
[2025-11-04 09:00:14] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=525
[2025-11-04 09:00:15] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=540
[2025-11-04 09:00:16] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=560
[2025-11-04 09:00:18] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=1200
[2025-11-04 09:00:19] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=1300
[2025-11-04 09:00:20] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=1500
[2025-11-04 09:00:21] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=1900
[2025-11-04 09:00:22] SRC=192.168.10.22 DST=104.27.122.12 PROTO=HTTP SIZE=2000
"""
