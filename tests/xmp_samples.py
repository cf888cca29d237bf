"""XMP packets and image builders shared by the metadata tests."""
from __future__ import annotations

from pathlib import Path

from PIL import Image
from PIL.PngImagePlugin import PngInfo

XMP_PACKET_TEMPLATE = """<?xpacket begin="" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
 <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
{body}
 </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""

FULL_DESCRIPTION = """  <rdf:Description rdf:about=""
    xmlns:xap="http://ns.adobe.com/xap/1.0/"
    xmlns:dc="http://purl.org/dc/elements/1.1/">
   <xap:Rating>4</xap:Rating>
   <dc:subject><rdf:Bag><rdf:li>b</rdf:li><rdf:li>a</rdf:li><rdf:li>c</rdf:li></rdf:Bag></dc:subject>
   <dc:title><rdf:Alt><rdf:li xml:lang="x-default">Harbour</rdf:li><rdf:li xml:lang="fr-FR">Port</rdf:li></rdf:Alt></dc:title>
   <dc:creator><rdf:Seq><rdf:li>Ana</rdf:li><rdf:li>Bo</rdf:li></rdf:Seq></dc:creator>
  </rdf:Description>"""

MICROSOFT_DESCRIPTION = """  <rdf:Description rdf:about=""
    xmlns:MicrosoftPhoto="http://ns.microsoft.com/photo/1.0"
    MicrosoftPhoto:Rating="{percent}"/>"""

MALFORMED_DESCRIPTION = """  <rdf:Description rdf:about="">
   <dc:title xmlns:dc="http://purl.org/dc/elements/1.1/"><rdf:Alt></dc:title>
  </rdf:Description>"""


def make_packet(body: str = FULL_DESCRIPTION) -> str:
    return XMP_PACKET_TEMPLATE.format(body=body)


def fragment_of(packet: str) -> str:
    start = packet.index("<rdf:RDF")
    end = packet.index("</rdf:RDF>") + len("</rdf:RDF>")
    return packet[start:end]


def make_binary_blob(packet: str, trailer: bytes = b"\x00\xff\xd9 trailing <junk> bytes") -> bytes:
    """Packet surrounded by bytes that are not valid UTF-8."""
    return b"\xff\xd8\xff\xe1\x00\x10Exif\x00\x00\x89\x90" + packet.encode("utf-8") + trailer


def save_png_with_xmp(path: Path, packet: str, compressed: bool = False) -> Path:
    info = PngInfo()
    info.add_itxt("XML:com.adobe.xmp", packet, zip=compressed)
    Image.new("RGB", (64, 32), "white").save(path, pnginfo=info)
    return path
