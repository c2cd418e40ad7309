"""Shared fixtures: small OFAC, UN and EU style documents and file helpers."""

from pathlib import Path

import pytest
from lxml import etree


OFAC_XML = """<?xml version="1.0" encoding="UTF-8"?>
<sdnList xmlns="http://tempuri.org/sdnList.xsd">
  <publshInformation>
    <Publish_Date>10/14/2026</Publish_Date>
    <Record_Count>2</Record_Count>
  </publshInformation>
  <sdnEntry>
    <uid>36</uid>
    <lastName>AEROCARIBBEAN AIRLINES</lastName>
    <sdnType>Entity</sdnType>
    <programList>
      <program>CUBA</program>
    </programList>
    <akaList>
      <aka>
        <uid>12</uid>
        <type>a.k.a.</type>
        <category>strong</category>
        <lastName>AERO-CARIBBEAN</lastName>
      </aka>
    </akaList>
    <addressList>
      <address>
        <uid>25</uid>
        <city>Havana</city>
        <country>Cuba</country>
      </address>
    </addressList>
  </sdnEntry>
  <sdnEntry>
    <uid>173</uid>
    <firstName>Ali</firstName>
    <lastName>KHAN</lastName>
    <sdnType>Individual</sdnType>
    <idList>
      <id>
        <uid>1</uid>
        <idType>Passport</idType>
        <idNumber>AB1234567</idNumber>
      </id>
    </idList>
    <dateOfBirthList>
      <dateOfBirthItem>
        <uid>2</uid>
        <dateOfBirth>01 Jan 1960</dateOfBirth>
        <mainEntry>true</mainEntry>
      </dateOfBirthItem>
    </dateOfBirthList>
  </sdnEntry>
</sdnList>
"""

UN_XML = """<?xml version="1.0" encoding="UTF-8"?>
<CONSOLIDATED_LIST dateGenerated="2026-10-01T00:00:00">
  <INDIVIDUALS>
    <INDIVIDUAL>
      <DATAID>6908555</DATAID>
      <FIRST_NAME>ABDUL</FIRST_NAME>
      <SECOND_NAME>GHANI</SECOND_NAME>
      <THIRD_NAME>BARADAR</THIRD_NAME>
      <UN_LIST_TYPE>Taliban</UN_LIST_TYPE>
      <LISTED_ON>2001-02-23</LISTED_ON>
      <COMMENTS1>Confirmed to have died in 2015. Location: Kabul</COMMENTS1>
      <INDIVIDUAL_ALIAS>
        <QUALITY>Good</QUALITY>
        <ALIAS_NAME>Mullah Baradar</ALIAS_NAME>
      </INDIVIDUAL_ALIAS>
      <INDIVIDUAL_DATE_OF_BIRTH>
        <TYPE_OF_DATE>APPROXIMATELY</TYPE_OF_DATE>
        <YEAR>1968</YEAR>
      </INDIVIDUAL_DATE_OF_BIRTH>
      <INDIVIDUAL_DOCUMENT>
        <TYPE_OF_DOCUMENT>Passport</TYPE_OF_DOCUMENT>
        <NUMBER>OR1961825</NUMBER>
      </INDIVIDUAL_DOCUMENT>
    </INDIVIDUAL>
    <INDIVIDUAL>
      <DATAID>6908556</DATAID>
      <FIRST_NAME>HAJI</FIRST_NAME>
      <SECOND_NAME>KHAIRULLAH</SECOND_NAME>
      <UN_LIST_TYPE>Taliban</UN_LIST_TYPE>
    </INDIVIDUAL>
  </INDIVIDUALS>
  <ENTITIES>
    <ENTITY>
      <DATAID>110001</DATAID>
      <FIRST_NAME>AL-RASHID TRUST</FIRST_NAME>
      <UN_LIST_TYPE>Al-Qaida</UN_LIST_TYPE>
      <ENTITY_ADDRESS>
        <STREET>Kitab Ghar</STREET>
        <CITY>Karachi</CITY>
        <COUNTRY>Pakistan</COUNTRY>
      </ENTITY_ADDRESS>
    </ENTITY>
    <ENTITY>
      <DATAID>110002</DATAID>
      <FIRST_NAME>WAFA HUMANITARIAN ORGANIZATION</FIRST_NAME>
      <UN_LIST_TYPE>Al-Qaida</UN_LIST_TYPE>
    </ENTITY>
  </ENTITIES>
</CONSOLIDATED_LIST>
"""

EU_XML = """<?xml version="1.0" encoding="UTF-8"?>
<export xmlns="http://eu.europa.ec/fpi/fsd/export" generationDate="2026-10-01">
  <sanctionEntity designationDate="2022-02-23" logicalId="13">
    <subjectType code="person" classificationCode="P"/>
    <nameAlias firstName="Sergei" middleName="" lastName="IVANOV" wholeName="Sergei IVANOV" strong="true" logicalId="14"/>
    <nameAlias wholeName="Sergey Ivanov" strong="false" logicalId="15"/>
    <birthdate birthdate="1953-01-31" year="1953" logicalId="16"/>
    <citizen countryDescription="RUSSIA"/>
    <address city="Moscow" countryDescription="RUSSIA" street="Tverskaya 1" logicalId="17"/>
  </sanctionEntity>
  <sanctionEntity designationDate="2022-03-15" logicalId="20">
    <subjectType code="enterprise" classificationCode="E"/>
    <nameAlias wholeName="Rosneft Trading" strong="true" logicalId="21"/>
  </sanctionEntity>
</export>
"""


@pytest.fixture
def ofac_root():
    return etree.fromstring(OFAC_XML.encode("utf-8"))


@pytest.fixture
def un_root():
    return etree.fromstring(UN_XML.encode("utf-8"))


@pytest.fixture
def eu_root():
    return etree.fromstring(EU_XML.encode("utf-8"))


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ofac_file(write_file):
    return write_file("sdn_advanced.xml", OFAC_XML)


@pytest.fixture
def un_file(write_file):
    return write_file("consolidated.xml", UN_XML)


@pytest.fixture
def eu_file(write_file):
    return write_file("eu_fsf.xml", EU_XML)


@pytest.fixture
def recording_reporter():
    """Reporter that keeps every call in memory."""

    class RecordingReporter:
        def __init__(self):
            self.found_calls = []
            self.not_found_calls = []
            self.warnings = []

        def found(self, component, value, source):
            self.found_calls.append((component, value, source))

        def not_found(self, component):
            self.not_found_calls.append(component)

        def warning(self, component, message, *args):
            self.warnings.append((component, message % args if args else message))

    return RecordingReporter()
