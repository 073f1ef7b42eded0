"""WebDAV XML elements."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from lxml import etree

from .internal import DecodeError, status_ok
from .xml_utils import element_text, find_local

# WebDAV namespace
NAMESPACE = "DAV:"
NS = {"D": NAMESPACE}

# Namespace used by SabreDAV based servers (Nextcloud, ownCloud) for errors
SABRE_NAMESPACE = "http://sabredav.org/ns"

# Common XML names
MULTISTATUS = "{DAV:}multistatus"
RESPONSE = "{DAV:}response"
HREF = "{DAV:}href"
PROPSTAT = "{DAV:}propstat"
PROP = "{DAV:}prop"
STATUS = "{DAV:}status"
RESOURCE_TYPE = "{DAV:}resourcetype"
COLLECTION = "{DAV:}collection"
DISPLAY_NAME = "{DAV:}displayname"
GET_CONTENT_LENGTH = "{DAV:}getcontentlength"
GET_LAST_MODIFIED = "{DAV:}getlastmodified"
ERROR = "{DAV:}error"

# Wed, 27 Sep 2017 14:28:34 GMT
TIME_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"

# Two digit day, four digit year, and only the zones meaning UTC
_TIME_RE = re.compile(
    r"[A-Z][a-z]{2}, \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} (GMT|UTC)",
    re.ASCII,
)


@dataclass(frozen=True)
class Time:
    """A point in time marshalled to and from RFC 1123 text."""

    value: datetime

    def __post_init__(self) -> None:
        value = self.value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "value", value.astimezone(timezone.utc))

    def to_string(self) -> str:
        """Marshal time to text."""
        # %Y doesn't zero pad years before 1000
        return self.value.strftime(f"%a, %d %b {self.value.year:04d} %H:%M:%S GMT")

    @staticmethod
    def from_string(s: str) -> Time:
        """Unmarshal time from text.

        The weekday must be a day name but isn't checked against the date.
        The zone may be GMT or UTC.

        Raises:
            DecodeError: If the text is not in RFC 1123 form
        """
        # strptime alone accepts single digit fields and padding whitespace
        if _TIME_RE.fullmatch(s) is None:
            raise DecodeError(f"invalid time {s!r}: not in RFC 1123 form")

        try:
            parsed = datetime.strptime(s, TIME_FORMAT)
        except ValueError as e:
            raise DecodeError(f"invalid time {s!r}", e) from e
        return Time(parsed)

    def to_xml(self, tag: str = GET_LAST_MODIFIED) -> etree._Element:
        """Convert to XML element."""
        elem = etree.Element(tag)
        elem.text = self.to_string()
        return elem

    @staticmethod
    def from_xml(element: etree._Element) -> Time:
        """Parse from XML element."""
        return Time.from_string(element_text(element))


@dataclass
class Prop:
    """Properties and status of a resource from a propstat element."""

    status: str = ""
    name: str = ""
    is_collection: bool = False
    size: int = 0
    modified: Time | None = None

    def status_ok(self) -> bool:
        """Check if the status line reports success."""
        return status_ok(self.status)

    def to_xml(self) -> etree._Element:
        """Convert to a propstat XML element."""
        propstat = etree.Element(PROPSTAT)
        prop = etree.SubElement(propstat, PROP)

        if self.name:
            etree.SubElement(prop, DISPLAY_NAME).text = self.name
        if self.is_collection:
            rt = etree.SubElement(prop, RESOURCE_TYPE)
            etree.SubElement(rt, COLLECTION)
        if self.size:
            etree.SubElement(prop, GET_CONTENT_LENGTH).text = str(self.size)
        if self.modified is not None:
            prop.append(self.modified.to_xml(GET_LAST_MODIFIED))

        etree.SubElement(propstat, STATUS).text = self.status
        return propstat

    @staticmethod
    def from_xml(elements: list[etree._Element]) -> Prop:
        """Parse from the propstat elements of a single response.

        Properties from later propstat blocks overwrite earlier ones when
        they carry a value. The status is the first successful one, or the
        last one seen if none succeeded.
        """
        p = Prop()
        ok_status = ""

        for propstat in elements:
            status_el = propstat.find(STATUS)
            if status_el is not None:
                p.status = element_text(status_el)
                if not ok_status and p.status_ok():
                    ok_status = p.status

            prop_el = propstat.find(PROP)
            if prop_el is not None:
                p._merge(prop_el)

        if ok_status:
            p.status = ok_status
        return p

    def _merge(self, prop_el: etree._Element) -> None:
        name_el = prop_el.find(DISPLAY_NAME)
        if name_el is not None and name_el.text:
            self.name = name_el.text

        if prop_el.find(f"{RESOURCE_TYPE}/{COLLECTION}") is not None:
            self.is_collection = True

        length_el = prop_el.find(GET_CONTENT_LENGTH)
        length = element_text(length_el).strip()
        if length:
            try:
                self.size = int(length)
            except ValueError as e:
                raise DecodeError(f"invalid content length {length!r}", e) from e

        modified_el = prop_el.find(GET_LAST_MODIFIED)
        if modified_el is not None and modified_el.text:
            self.modified = Time.from_xml(modified_el)


@dataclass
class Response:
    """WebDAV response element."""

    href: str = ""
    props: Prop = field(default_factory=Prop)

    def to_xml(self) -> etree._Element:
        """Convert to XML element."""
        resp = etree.Element(RESPONSE)
        etree.SubElement(resp, HREF).text = self.href
        resp.append(self.props.to_xml())
        return resp

    @staticmethod
    def from_xml(element: etree._Element) -> Response:
        """Parse from XML element."""
        href_el = element.find(HREF)
        props = Prop.from_xml(element.findall(PROPSTAT))
        return Response(href=element_text(href_el), props=props)


@dataclass
class Multistatus:
    """WebDAV multistatus response, as returned with HTTP 207."""

    responses: list[Response] = field(default_factory=list)

    def by_href(self) -> dict[str, Prop]:
        """Map each response href to its properties."""
        return {resp.href: resp.props for resp in self.responses}

    def to_xml(self) -> etree._Element:
        """Convert to XML element."""
        root = etree.Element(MULTISTATUS, nsmap=NS)
        for resp in self.responses:
            root.append(resp.to_xml())
        return root

    @staticmethod
    def from_xml(element: etree._Element) -> Multistatus:
        """Parse from XML element."""
        responses = []
        for resp_el in element.findall(RESPONSE):
            responses.append(Response.from_xml(resp_el))
        return Multistatus(responses=responses)


@dataclass
class PropValue:
    """A single property: a tagged name and its character data."""

    tag: str
    value: str = ""

    def to_xml(self) -> etree._Element:
        """Convert to XML element."""
        elem = etree.Element(self.tag)
        elem.text = self.value
        return elem

    @staticmethod
    def from_xml(element: etree._Element) -> PropValue:
        """Parse from XML element."""
        return PropValue(tag=element.tag, value=element_text(element))


class Error(Exception):
    """WebDAV error, as sent in an error body.

    <d:error xmlns:d="DAV:" xmlns:s="http://sabredav.org/ns">
      <s:exception>Sabre\\DAV\\Exception\\NotFound</s:exception>
      <s:message>File with name Photo could not be located</s:message>
    </d:error>

    ``status`` and ``status_code`` come from the HTTP response line and are
    filled in by the transport, not by decoding.
    """

    def __init__(
        self,
        exception: str = "",
        message: str = "",
        status: str = "",
        status_code: int = 0,
    ):
        self.exception = exception
        self.message = message
        self.status = status
        self.status_code = status_code
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.exception:
            return self.exception
        if self.status:
            return self.status
        return "Webdav Error"

    def __repr__(self) -> str:
        return (
            f"Error(exception={self.exception!r}, message={self.message!r}, "
            f"status={self.status!r}, status_code={self.status_code!r})"
        )

    def to_xml(self) -> etree._Element:
        """Convert to XML element."""
        root = etree.Element(ERROR, nsmap={"d": NAMESPACE, "s": SABRE_NAMESPACE})
        if self.exception:
            etree.SubElement(root, f"{{{SABRE_NAMESPACE}}}exception").text = self.exception
        if self.message:
            etree.SubElement(root, f"{{{SABRE_NAMESPACE}}}message").text = self.message
        return root

    @staticmethod
    def from_xml(element: etree._Element) -> Error:
        """Parse from XML element, matching children by local name."""
        return Error(
            exception=element_text(find_local(element, "exception")),
            message=element_text(find_local(element, "message")),
        )
