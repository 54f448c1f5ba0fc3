from __future__ import annotations

from io import StringIO

from upnpdig.utils import TabWriter, align_columns, ensure_list, xml2dict


def test_ensure_list():
    assert ensure_list(None) == []
    assert ensure_list({"a": 1}) == [{"a": 1}]
    assert ensure_list([1, 2]) == [1, 2]


def test_xml2dict_drops_upnp_namespace():
    xml = (
        '<root xmlns="urn:schemas-upnp-org:device-1-0">'
        "<device><friendlyName>Kitchen</friendlyName></device></root>"
    )

    info = xml2dict(xml)

    assert info.root.device.friendlyName == "Kitchen"
    assert xml2dict(xml, as_dotmap=False)["root"]["device"]["friendlyName"] == "Kitchen"


def test_align_columns():
    text = "Name\tVolume\nDataType\tui2\n"

    assert align_columns(text) == "Name     Volume\nDataType ui2\n"


def test_align_columns_blocks_break_on_plain_lines():
    text = "Name\tGetVolume\nArguments:\n\tName\tChannel\n\tDirection\tin\n\n"

    assert align_columns(text) == (
        "Name GetVolume\n"
        "Arguments:\n"
        " Name      Channel\n"
        " Direction in\n"
        "\n"
    )


def test_align_columns_nested_padding():
    text = "Services\n\t    ServiceId\turn:a\n\t    SCPD URL\t/x.xml\n"

    assert align_columns(text) == (
        "Services\n"
        "     ServiceId urn:a\n"
        "     SCPD URL  /x.xml\n"
    )


def test_align_columns_keeps_unterminated_tail():
    assert align_columns("a\tb\ntail") == "a b\ntail"


def test_tab_writer_flushes_aligned_output():
    out = StringIO()
    w = TabWriter(out)

    w.write("UDN\tuuid:1\n")
    w.write("FriendlyName\tKitchen\n")
    assert out.getvalue() == ""

    w.flush()

    assert out.getvalue() == "UDN          uuid:1\nFriendlyName Kitchen\n"
