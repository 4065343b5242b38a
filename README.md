# psen_scan

Building blocks for working with PSENscan safety laser scanners in plain Python.

## Modules

- `psen_scan.configuration`: default parameters (ports, angles, ranges), `ScannerId`, `ZoneSet`, `ZoneSetSpeedRange` (raises `ZoneSetSpeedRangeException` when min > max) and `ZoneSetConfiguration`.
- `psen_scan.xml_parsing`: reads zoneset configurations from XML files written by the configurator software (`parse_file`, `parse_string`). It also decodes `<ro>` distance strings (`ro_value_to_uint`, `ro_string_to_vec`). Any problem raises `XMLConfigurationParserException`.
- `psen_scan.laserscan`: the `LaserScan` dataclass, which holds measurements, intensities, the angle range and resolution in tenths of a degree, the scan counter, the active zoneset and the timestamp. Invalid resolutions or angle ranges raise `ValueError`.
- `psen_scan.scanner_reply`: reply messages from the scanner (`Message`, `ReplyType`, `OperationResult`, `convert_to_reply_type`, `convert_to_operation_result`).
- `psen_scan.raw_processing`: `read`, `read_array`, `write` and `write_array` handle binary fields on byte streams, little-endian unless the struct format says otherwise. A short read raises `StringStreamFailure`.
- `psen_scan.parameters`: typed lookups in a mapping (`get_param`, `get_optional_param`, `get_required_param`). They raise `ParamMissingOnServer` or `WrongParameterType`.

## Installation

```
pip install .
```

## Example

```python
from psen_scan.xml_parsing import parse_file

config = parse_file("zoneset_config.xml")
for zoneset in config.zonesets:
    print(zoneset.safety1, zoneset.speed_range)
```

```python
import io
from psen_scan import raw_processing

stream = io.BytesIO()
raw_processing.write(stream, "<H", 7)
stream.seek(0)
assert raw_processing.read(stream, "<H") == 7
```

## What it does not do

The package does not talk to a scanner over the network. It has no UDP client, no start/stop state machine and no monitoring frame decoding. It also has no command-line tool. It provides only the data types, the XML configuration reader and the binary field helpers listed above.

## Running the tests

```
pip install .[test]
pytest
```