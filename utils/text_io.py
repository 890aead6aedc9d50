import io

from pdfminer.high_level import extract_text as pdf_extract_text


def read_files_as_texts(files):
    texts, names = [], []
    if not files:
        return texts, names
    for f in files:
        name = getattr(f, "name", "uploaded.txt")
        data = f.read()
        if name.lower().endswith(".pdf"):
            txt = pdf_extract_text(io.BytesIO(data)) or ""
        else:
            try:
                txt = data.decode("utf-8", errors="ignore")
            except AttributeError:
                txt = str(data)
        texts.append(txt)
        names.append(name)
    return texts, names
