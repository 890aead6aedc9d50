import io

from utils.text_io import read_files_as_texts


def _upload(data, name):
    f = io.BytesIO(data)
    f.name = name
    return f


def test_reads_text_uploads():
    texts, names = read_files_as_texts([_upload("héllo".encode("utf-8"), "a.txt"),
                                        _upload(b"ab\xffc", "b.txt")])
    assert texts == ["héllo", "abc"]
    assert names == ["a.txt", "b.txt"]


def test_no_files():
    assert read_files_as_texts(None) == ([], [])


def _one_page_pdf(line):
    content = f"BT /F1 18 Tf 20 100 Td ({line}) Tj ET".encode("ascii")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 300 144] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref)
    return bytes(out)


def test_reads_pdf_uploads():
    texts, names = read_files_as_texts([_upload(_one_page_pdf("abababcab"), "Notes.PDF")])
    assert names == ["Notes.PDF"]
    assert "abababcab" in texts[0]
