from __future__ import annotations

import logging

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

DEVICE_XML = """<?xml version="1.0"?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <specVersion><major>1</major><minor>0</minor></specVersion>
  <device>
    <deviceType>urn:schemas-upnp-org:device:ZonePlayer:1</deviceType>
    <friendlyName>Living Room</friendlyName>
    <manufacturer>Sonos, Inc.</manufacturer>
    <manufacturerURL>http://www.sonos.com</manufacturerURL>
    <modelNumber>S12</modelNumber>
    <modelDescription>Sonos One</modelDescription>
    <modelName>One</modelName>
    <modelURL>http://www.sonos.com/products/zoneplayers/S12</modelURL>
    <serialNumber>5C-AA-FD-00-00-01:A</serialNumber>
    <UDN>uuid:RINCON_5CAAFD000001</UDN>
    <serviceList>
      <service>
        <serviceType>urn:schemas-upnp-org:service:AlarmClock:1</serviceType>
        <serviceId>urn:upnp-org:serviceId:AlarmClock</serviceId>
        <controlURL>/AlarmClock/Control</controlURL>
        <eventSubURL>/AlarmClock/Event</eventSubURL>
        <SCPDURL>/xml/AlarmClock1.xml</SCPDURL>
      </service>
    </serviceList>
    <deviceList>
      <device>
        <deviceType>urn:schemas-upnp-org:device:MediaRenderer:1</deviceType>
        <friendlyName>Living Room - Media Renderer</friendlyName>
        <UDN>uuid:RINCON_5CAAFD000001_MR</UDN>
        <serviceList>
          <service>
            <serviceType>urn:schemas-upnp-org:service:RenderingControl:1</serviceType>
            <serviceId>urn:upnp-org:serviceId:RenderingControl</serviceId>
            <controlURL>/MediaRenderer/RenderingControl/Control</controlURL>
            <eventSubURL>/MediaRenderer/RenderingControl/Event</eventSubURL>
            <SCPDURL>/xml/RenderingControl1.xml</SCPDURL>
          </service>
          <service>
            <serviceType>urn:schemas-upnp-org:service:AVTransport:1</serviceType>
            <serviceId>urn:upnp-org:serviceId:AVTransport</serviceId>
            <controlURL>/MediaRenderer/AVTransport/Control</controlURL>
            <eventSubURL>/MediaRenderer/AVTransport/Event</eventSubURL>
            <SCPDURL>/xml/AVTransport1.xml</SCPDURL>
          </service>
        </serviceList>
      </device>
    </deviceList>
  </device>
</root>
"""

SCPD_XML = """<?xml version="1.0"?>
<scpd xmlns="urn:schemas-upnp-org:service-1-0">
  <specVersion><major>1</major><minor>0</minor></specVersion>
  <serviceStateTable>
    <stateVariable sendEvents="no">
      <name>Volume</name>
      <dataType>ui2</dataType>
      <defaultValue>10</defaultValue>
      <allowedValueRange>
        <minimum>0</minimum>
        <maximum>100</maximum>
        <step>1</step>
      </allowedValueRange>
    </stateVariable>
    <stateVariable sendEvents="yes" multicast="yes">
      <name>A_ARG_TYPE_Channel</name>
      <dataType>string</dataType>
      <allowedValueList>
        <allowedValue>Master</allowedValue>
        <allowedValue>LF</allowedValue>
        <allowedValue>RF</allowedValue>
      </allowedValueList>
    </stateVariable>
  </serviceStateTable>
  <actionList>
    <action>
      <name>GetVolume</name>
      <argumentList>
        <argument>
          <name>Channel</name>
          <direction>in</direction>
          <relatedStateVariable>A_ARG_TYPE_Channel</relatedStateVariable>
        </argument>
        <argument>
          <name>CurrentVolume</name>
          <direction>out</direction>
          <retval/>
          <relatedStateVariable>Volume</relatedStateVariable>
        </argument>
      </argumentList>
    </action>
    <action>
      <name>Reset</name>
    </action>
  </actionList>
</scpd>
"""


def pytest_configure(config):
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@pytest_asyncio.fixture
async def session():
    import upnpdig.utils

    yield upnpdig.utils.g.create_session()

    await upnpdig.utils.g.http.close()


@pytest_asyncio.fixture
async def device_server():
    async def device_description(request: web.Request):
        return web.Response(text=DEVICE_XML, content_type="text/xml")

    async def rendering_control(request: web.Request):
        return web.Response(text=SCPD_XML, content_type="text/xml")

    async def broken(request: web.Request):
        return web.Response(text="<root><device>", content_type="text/xml")

    app = web.Application()
    app.router.add_get("/xml/device_description.xml", device_description)
    app.router.add_get("/xml/RenderingControl1.xml", rendering_control)
    app.router.add_get("/broken.xml", broken)

    async with TestServer(app) as server:
        yield server


@pytest.fixture
def scpd_xml():
    return SCPD_XML


@pytest.fixture
def device_xml():
    return DEVICE_XML
