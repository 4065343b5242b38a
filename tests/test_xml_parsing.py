import pytest

from psen_scan.configuration import DEFAULT_ZONESET_ANGLE_STEP, ZoneSetSpeedRange
from psen_scan.xml_parsing import (
    XMLConfigurationParserException,
    parse_file,
    parse_string,
    ro_string_to_vec,
    ro_value_to_uint,
)

ZONESETS = """
  <scannerDescr>
    <zoneSetDefinition>
      <zoneSetInfo>
        <zoneSetDetail><type>roOSSD1</type><ro>D307ED03</ro></zoneSetDetail>
        <zoneSetDetail><type>warn1</type><ro>2B018913</ro></zoneSetDetail>
      </zoneSetInfo>
      <zoneSetInfo>
        <zoneSetDetail><type>roOSSD1</type><ro>8913</ro></zoneSetDetail>
      </zoneSetInfo>
    </zoneSetDefinition>
  </scannerDescr>
"""

SELECTORS = """
        <zoneSetSelector>
          <zoneSetSpeedRange><minSpeed>-10</minSpeed><maxSpeed>10</maxSpeed></zoneSetSpeedRange>
        </zoneSetSelector>
        <zoneSetSelector>
          <zoneSetSpeedRange><minSpeed>11</minSpeed><maxSpeed>50</maxSpeed></zoneSetSpeedRange>
        </zoneSetSelector>
"""


def make_xml(enc="false", zonesets=ZONESETS, selectors=SELECTORS):
    return f"""<MIB>
{zonesets}
  <clusterDescr>
    <zoneSetConfiguration>
      <encEnable>{enc}</encEnable>
      <zoneSetSelCode>{selectors}</zoneSetSelCode>
    </zoneSetConfiguration>
  </clusterDescr>
</MIB>"""


@pytest.mark.parametrize(
    "ro_value, expected",
    [("D307", 2003), ("ED03", 1005), ("2B01", 299), ("8913", 5001)],
)
def test_ro_value_to_uint_documented_examples(ro_value, expected):
    assert ro_value_to_uint(ro_value) == expected


def test_ro_string_to_vec_converts_groups_of_four():
    assert ro_string_to_vec("D307ED032B018913") == [2003, 1005, 299, 5001]


def test_ro_string_to_vec_ignores_incomplete_trailing_group():
    assert ro_string_to_vec("D307ED0") == [2003]


def test_ro_string_to_vec_empty():
    assert ro_string_to_vec("") == []


def test_ro_string_to_vec_rejects_non_hex():
    with pytest.raises(XMLConfigurationParserException):
        ro_string_to_vec("ZZZZ")


def test_parse_string_reads_zonesets():
    config = parse_string(make_xml())
    assert len(config.zonesets) == 2
    first, second = config.zonesets
    assert first.safety1 == [2003, 1005]
    assert first.warn1 == [299, 5001]
    assert first.safety2 == []
    assert second.safety1 == [5001]
    assert first.resolution == DEFAULT_ZONESET_ANGLE_STEP
    assert first.speed_range is None


@pytest.mark.parametrize("enc", ["true", "1", "TRUE"])
def test_parse_string_assigns_speed_ranges_when_encoder_enabled(enc):
    config = parse_string(make_xml(enc=enc))
    assert [z.speed_range for z in config.zonesets] == [
        ZoneSetSpeedRange(-10, 10),
        ZoneSetSpeedRange(11, 50),
    ]


def test_parse_string_mismatching_speed_range_count():
    one_selector = SELECTORS.split("</zoneSetSelector>")[0] + "</zoneSetSelector>"
    with pytest.raises(XMLConfigurationParserException, match="1 speedRanges and 2 defined zones"):
        parse_string(make_xml(enc="true", selectors=one_selector))


def test_parse_string_invalid_enc_value():
    with pytest.raises(XMLConfigurationParserException, match="encEnable"):
        parse_string(make_xml(enc="maybe"))


def test_parse_string_invalid_min_speed():
    bad = SELECTORS.replace("<minSpeed>11</minSpeed>", "<minSpeed>abc</minSpeed>")
    with pytest.raises(XMLConfigurationParserException, match="minSpeed"):
        parse_string(make_xml(enc="true", selectors=bad))


def test_parse_string_invalid_zone_type():
    bad = ZONESETS.replace("<type>warn1</type>", "<type>other</type>")
    with pytest.raises(XMLConfigurationParserException, match="Invalid <type>"):
        parse_string(make_xml(zonesets=bad))


def test_parse_string_empty_ro_element():
    bad = ZONESETS.replace("<ro>8913</ro>", "<ro></ro>")
    with pytest.raises(XMLConfigurationParserException, match="<ro> element is empty"):
        parse_string(make_xml(zonesets=bad))


def test_parse_string_missing_ro_child():
    bad = ZONESETS.replace("<ro>8913</ro>", "")
    with pytest.raises(
        XMLConfigurationParserException,
        match="Element <zoneSetDetail> is missing a child <ro>",
    ):
        parse_string(make_xml(zonesets=bad))


def test_parse_string_missing_zoneset_definition():
    with pytest.raises(XMLConfigurationParserException, match="zoneSetInfo not complete"):
        parse_string(make_xml(zonesets=""))


def test_parse_string_missing_enc_enable():
    xml = "<MIB>" + ZONESETS + "</MIB>"
    with pytest.raises(XMLConfigurationParserException, match="encEnabled is broken"):
        parse_string(xml)


def test_parse_string_malformed_xml():
    with pytest.raises(XMLConfigurationParserException, match="Could not parse content."):
        parse_string("<MIB><unclosed></MIB>")


def test_parse_file_reads_same_as_string(tmp_path):
    path = tmp_path / "config.xml"
    path.write_text(make_xml(enc="true"))
    assert parse_file(str(path)) == parse_string(make_xml(enc="true"))


def test_parse_file_missing_file(tmp_path):
    missing = tmp_path / "missing.xml"
    with pytest.raises(XMLConfigurationParserException, match="Could not parse"):
        parse_file(str(missing))