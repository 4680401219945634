"""Static lookup tables between file extensions and MIME types."""

from __future__ import annotations

from typing import Dict

DEFAULT_MIME = "application/octet-stream"
DEFAULT_EXTENSION = "txt"

_EXTENSION_TO_MIME: Dict[str, str] = {
    "mpega": "audio/x-mpeg",
    "ps": "application/postscript",
    "aiff": "audio/x-aiff",
    "aim": "application/x-aim",
    "art": "image/x-jg",
    "asx": "video/x-ms-asf",
    "ulw": "audio/basic",
    "avi": "video/x-msvideo",
    "avx": "video/x-rad-screenplay",
    "bcpio": "application/x-bcpio",
    "exe": "application/octet-stream",
    "dib": "image/bmp",
    "html": "text/html",
    "cdf": "application/x-cdf",
    "cer": "application/pkix-cert",
    "class": "application/java",
    "cpio": "application/x-cpio",
    "csh": "application/x-csh",
    "css": "text/css",
    "doc": "application/msword",
    "dtd": "application/xml-dtd",
    "dv": "video/x-dv",
    "dvi": "application/x-dvi",
    "eot": "application/vnd.ms-fontobject",
    "etx": "text/x-setext",
    "gif": "image/gif",
    "gtar": "application/x-gtar",
    "gz": "application/x-gzip",
    "hdf": "application/x-hdf",
    "hqx": "application/mac-binhex40",
    "htc": "text/x-component",
    "ief": "image/ief",
    "jad": "text/vnd.sun.j2me.app-descriptor",
    "jar": "application/java-archive",
    "java": "text/x-java-source",
    "jnlp": "application/x-java-jnlp-file",
    "jpg": "image/jpeg",
    "js": "application/javascript",
    "txt": "text/plain",
    "json": "application/json",
    "midi": "audio/midi",
    "latex": "application/x-latex",
    "m3u": "audio/x-mpegurl",
    "pnt": "image/x-macpaint",
    "tr": "text/troff",
    "mathml": "application/mathml+xml",
    "mif": "application/x-mif",
    "qt": "video/quicktime",
    "movie": "video/x-sgi-movie",
    "mpa": "audio/mpeg",
    "mp4": "video/mp4",
    "mpg": "video/mpeg",
    "mpv2": "video/mpeg2",
    "src": "application/x-wais-source",
    "nc": "application/x-netcdf",
    "oda": "application/oda",
    "odb": "application/vnd.oasis.opendocument.database",
    "odc": "application/vnd.oasis.opendocument.chart",
    "odf": "application/vnd.oasis.opendocument.formula",
    "odg": "application/vnd.oasis.opendocument.graphics",
    "odi": "application/vnd.oasis.opendocument.image",
    "odm": "application/vnd.oasis.opendocument.text-master",
    "odp": "application/vnd.oasis.opendocument.presentation",
    "ods": "application/vnd.oasis.opendocument.spreadsheet",
    "odt": "application/vnd.oasis.opendocument.text",
    "otg": "application/vnd.oasis.opendocument.graphics-template",
    "oth": "application/vnd.oasis.opendocument.text-web",
    "otp": "application/vnd.oasis.opendocument.presentation-template",
    "ots": "application/vnd.oasis.opendocument.spreadsheet-template",
    "ott": "application/vnd.oasis.opendocument.text-template",
    "ogx": "application/ogg",
    "ogv": "video/ogg",
    "spx": "audio/ogg",
    "otf": "application/x-font-opentype",
    "flac": "audio/flac",
    "anx": "application/annodex",
    "axa": "audio/annodex",
    "axv": "video/annodex",
    "xspf": "application/xspf+xml",
    "pbm": "image/x-portable-bitmap",
    "pict": "image/pict",
    "pdf": "application/pdf",
    "pgm": "image/x-portable-graymap",
    "pls": "audio/x-scpls",
    "png": "image/png",
    "pnm": "image/x-portable-anymap",
    "ppm": "image/x-portable-pixmap",
    "pps": "application/vnd.ms-powerpoint",
    "psd": "image/vnd.adobe.photoshop",
    "qtif": "image/x-quicktime",
    "ras": "image/x-cmu-raster",
    "rdf": "application/rdf+xml",
    "rgb": "image/x-rgb",
    "rm": "application/vnd.rn-realmedia",
    "rtf": "application/rtf",
    "rtx": "text/richtext",
    "sfnt": "application/font-sfnt",
    "sh": "application/x-sh",
    "shar": "application/x-shar",
    "sit": "application/x-stuffit",
    "sv4cpio": "application/x-sv4cpio",
    "sv4crc": "application/x-sv4crc",
    "svg": "image/svg+xml",
    "swf": "application/x-shockwave-flash",
    "tar": "application/x-tar",
    "tcl": "application/x-tcl",
    "tex": "application/x-tex",
    "texinfo": "application/x-texinfo",
    "tiff": "image/tiff",
    "tsv": "text/tab-separated-values",
    "ttf": "application/x-font-ttf",
    "ustar": "application/x-ustar",
    "vxml": "application/voicexml+xml",
    "xbm": "image/x-xbitmap",
    "xhtml": "application/xhtml+xml",
    "xls": "application/vnd.ms-excel",
    "xsl": "application/xml",
    "xpm": "image/x-xpixmap",
    "xslt": "application/xslt+xml",
    "xul": "application/vnd.mozilla.xul+xml",
    "xwd": "image/x-xwindowdump",
    "vsd": "application/vnd.visio",
    "wav": "audio/x-wav",
    "wbmp": "image/vnd.wap.wbmp",
    "wml": "text/vnd.wap.wml",
    "wmlc": "application/vnd.wap.wmlc",
    "wmls": "text/vnd.wap.wmlsc",
    "wmlscriptc": "application/vnd.wap.wmlscriptc",
    "wmv": "video/x-ms-wmv",
    "woff": "application/font-woff",
    "woff2": "application/font-woff2",
    "wrl": "model/vrml",
    "wspolicy": "application/wspolicy+xml",
    "z": "application/x-compress",
    "zip": "application/zip",
    "jpeg": "image/jpeg",
    "jpe": "image/jpeg",
    "jfif": "image/jpeg",
    "webp": "image/webp",
    "avif": "image/avif",
    "apng": "image/apng",
    "ico": "image/x-icon",
    "bmp": "image/bmp",
    "tif": "image/tiff",
    "heic": "image/heic",
    "heif": "image/heif",
    "jxl": "image/jxl",
    "svgz": "image/svg+xml",
    "webm": "video/webm",
    "ogg": "audio/ogg",
    "oga": "audio/ogg",
    "opus": "audio/opus",
    "mp3": "audio/mpeg",
    "m4a": "audio/mp4",
    "aac": "audio/aac",
    "weba": "audio/webm",
    "wma": "audio/x-ms-wma",
    "mid": "audio/midi",
    "kar": "audio/midi",
    "aif": "audio/x-aiff",
    "aifc": "audio/x-aiff",
    "au": "audio/basic",
    "snd": "audio/basic",
    "3gp": "video/3gpp",
    "3g2": "video/3gpp2",
    "mov": "video/quicktime",
    "mpeg": "video/mpeg",
    "mpe": "video/mpeg",
    "m4v": "video/x-m4v",
    "mkv": "video/x-matroska",
    "flv": "video/x-flv",
    "m3u8": "application/vnd.apple.mpegurl",
    "mpd": "application/dash+xml",
    "ttc": "font/collection",
    "htm": "text/html",
    "shtml": "text/html",
    "mjs": "application/javascript",
    "cjs": "application/javascript",
    "jsonld": "application/ld+json",
    "map": "application/json",
    "webmanifest": "application/manifest+json",
    "wasm": "application/wasm",
    "xml": "application/xml",
    "csv": "text/csv",
    "md": "text/markdown",
    "markdown": "text/markdown",
    "yaml": "text/yaml",
    "yml": "text/yaml",
    "toml": "application/toml",
    "ics": "text/calendar",
    "vtt": "text/vtt",
    "srt": "application/x-subrip",
    "rss": "application/rss+xml",
    "atom": "application/atom+xml",
    "text": "text/plain",
    "log": "text/plain",
    "ini": "text/plain",
    "conf": "text/plain",
    "scss": "text/x-scss",
    "sass": "text/x-sass",
    "less": "text/less",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "epub": "application/epub+zip",
    "7z": "application/x-7z-compressed",
    "rar": "application/vnd.rar",
    "bz2": "application/x-bzip2",
    "xz": "application/x-xz",
    "tgz": "application/gzip",
    "zst": "application/zstd",
    "gltf": "model/gltf+json",
    "glb": "model/gltf-binary",
    "obj": "model/obj",
    "stl": "model/stl",
    "usdz": "model/vnd.usdz+zip",
    "ai": "application/postscript",
    "eps": "application/postscript",
    "py": "text/x-python",
    "rb": "text/x-ruby",
    "c": "text/x-c",
    "h": "text/x-c",
    "cpp": "text/x-c++src",
    "hpp": "text/x-c++hdr",
    "go": "text/x-go",
    "rs": "text/rust",
    "sql": "application/sql",
    "php": "application/x-httpd-php",
    "bin": "application/octet-stream",
    "dll": "application/octet-stream",
    "iso": "application/x-iso9660-image",
    "dmg": "application/x-apple-diskimage",
    "deb": "application/vnd.debian.binary-package",
    "apk": "application/vnd.android.package-archive",
    "msi": "application/x-msdownload",
    "torrent": "application/x-bittorrent",
}

_MIME_TO_EXTENSION: Dict[str, str] = {
    "audio/x-mpeg": "mpega",
    "application/postscript": "ps",
    "audio/x-aiff": "aiff",
    "application/x-aim": "aim",
    "image/x-jg": "art",
    "video/x-ms-asf": "asx",
    "audio/basic": "ulw",
    "video/x-msvideo": "avi",
    "video/x-rad-screenplay": "avx",
    "application/x-bcpio": "bcpio",
    "application/octet-stream": "exe",
    "image/bmp": "dib",
    "text/html": "html",
    "application/x-cdf": "cdf",
    "application/pkix-cert": "cer",
    "application/java": "class",
    "application/x-cpio": "cpio",
    "application/x-csh": "csh",
    "text/css": "css",
    "application/msword": "doc",
    "application/xml-dtd": "dtd",
    "video/x-dv": "dv",
    "application/x-dvi": "dvi",
    "application/vnd.ms-fontobject": "eot",
    "text/x-setext": "etx",
    "image/gif": "gif",
    "application/x-gtar": "gtar",
    "application/x-gzip": "gz",
    "application/x-hdf": "hdf",
    "application/mac-binhex40": "hqx",
    "text/x-component": "htc",
    "image/ief": "ief",
    "text/vnd.sun.j2me.app-descriptor": "jad",
    "application/java-archive": "jar",
    "text/x-java-source": "java",
    "application/x-java-jnlp-file": "jnlp",
    "image/jpeg": "jpg",
    "application/javascript": "js",
    "text/plain": "txt",
    "application/json": "json",
    "audio/midi": "midi",
    "application/x-latex": "latex",
    "audio/x-mpegurl": "m3u",
    "image/x-macpaint": "pnt",
    "text/troff": "tr",
    "application/mathml+xml": "mathml",
    "application/x-mif": "mif",
    "video/quicktime": "qt",
    "video/x-sgi-movie": "movie",
    "audio/mpeg": "mpa",
    "video/mp4": "mp4",
    "video/mpeg": "mpg",
    "video/mpeg2": "mpv2",
    "application/x-wais-source": "src",
    "application/x-netcdf": "nc",
    "application/oda": "oda",
    "application/vnd.oasis.opendocument.database": "odb",
    "application/vnd.oasis.opendocument.chart": "odc",
    "application/vnd.oasis.opendocument.formula": "odf",
    "application/vnd.oasis.opendocument.graphics": "odg",
    "application/vnd.oasis.opendocument.image": "odi",
    "application/vnd.oasis.opendocument.text-master": "odm",
    "application/vnd.oasis.opendocument.presentation": "odp",
    "application/vnd.oasis.opendocument.spreadsheet": "ods",
    "application/vnd.oasis.opendocument.text": "odt",
    "application/vnd.oasis.opendocument.graphics-template": "otg",
    "application/vnd.oasis.opendocument.text-web": "oth",
    "application/vnd.oasis.opendocument.presentation-template": "otp",
    "application/vnd.oasis.opendocument.spreadsheet-template": "ots",
    "application/vnd.oasis.opendocument.text-template": "ott",
    "application/ogg": "ogx",
    "video/ogg": "ogv",
    "audio/ogg": "spx",
    "application/x-font-opentype": "otf",
    "audio/flac": "flac",
    "application/annodex": "anx",
    "audio/annodex": "axa",
    "video/annodex": "axv",
    "application/xspf+xml": "xspf",
    "image/x-portable-bitmap": "pbm",
    "image/pict": "pict",
    "application/pdf": "pdf",
    "image/x-portable-graymap": "pgm",
    "audio/x-scpls": "pls",
    "image/png": "png",
    "image/x-portable-anymap": "pnm",
    "image/x-portable-pixmap": "ppm",
    "application/vnd.ms-powerpoint": "pps",
    "image/vnd.adobe.photoshop": "psd",
    "image/x-quicktime": "qtif",
    "image/x-cmu-raster": "ras",
    "application/rdf+xml": "rdf",
    "image/x-rgb": "rgb",
    "application/vnd.rn-realmedia": "rm",
    "application/rtf": "rtf",
    "text/richtext": "rtx",
    "application/font-sfnt": "sfnt",
    "application/x-sh": "sh",
    "application/x-shar": "shar",
    "application/x-stuffit": "sit",
    "application/x-sv4cpio": "sv4cpio",
    "application/x-sv4crc": "sv4crc",
    "image/svg+xml": "svg",
    "application/x-shockwave-flash": "swf",
    "application/x-tar": "tar",
    "application/x-tcl": "tcl",
    "application/x-tex": "tex",
    "application/x-texinfo": "texinfo",
    "image/tiff": "tiff",
    "text/tab-separated-values": "tsv",
    "application/x-font-ttf": "ttf",
    "application/x-ustar": "ustar",
    "application/voicexml+xml": "vxml",
    "image/x-xbitmap": "xbm",
    "application/xhtml+xml": "xhtml",
    "application/vnd.ms-excel": "xls",
    "application/xml": "xsl",
    "image/x-xpixmap": "xpm",
    "application/xslt+xml": "xslt",
    "application/vnd.mozilla.xul+xml": "xul",
    "image/x-xwindowdump": "xwd",
    "application/vnd.visio": "vsd",
    "audio/x-wav": "wav",
    "image/vnd.wap.wbmp": "wbmp",
    "text/vnd.wap.wml": "wml",
    "application/vnd.wap.wmlc": "wmlc",
    "text/vnd.wap.wmlsc": "wmls",
    "application/vnd.wap.wmlscriptc": "wmlscriptc",
    "video/x-ms-wmv": "wmv",
    "application/font-woff": "woff",
    "application/font-woff2": "woff2",
    "model/vrml": "wrl",
    "application/wspolicy+xml": "wspolicy",
    "application/x-compress": "z",
    "application/zip": "zip",
    "image/webp": "webp",
    "image/avif": "avif",
    "image/apng": "apng",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
    "image/heic": "heic",
    "image/heif": "heif",
    "image/jxl": "jxl",
    "video/webm": "webm",
    "video/3gpp": "3gp",
    "video/3gpp2": "3g2",
    "video/x-matroska": "mkv",
    "video/x-m4v": "m4v",
    "video/x-flv": "flv",
    "audio/webm": "weba",
    "audio/mp4": "m4a",
    "audio/aac": "aac",
    "audio/opus": "opus",
    "audio/wav": "wav",
    "audio/wave": "wav",
    "audio/mp3": "mp3",
    "audio/x-ms-wma": "wma",
    "font/woff": "woff",
    "font/woff2": "woff2",
    "font/ttf": "ttf",
    "font/otf": "otf",
    "font/collection": "ttc",
    "text/javascript": "js",
    "application/x-javascript": "js",
    "text/markdown": "md",
    "text/csv": "csv",
    "text/xml": "xml",
    "text/yaml": "yaml",
    "application/yaml": "yaml",
    "application/toml": "toml",
    "text/calendar": "ics",
    "text/vtt": "vtt",
    "application/x-subrip": "srt",
    "application/rss+xml": "rss",
    "application/atom+xml": "atom",
    "application/wasm": "wasm",
    "application/manifest+json": "webmanifest",
    "application/ld+json": "jsonld",
    "application/gzip": "gz",
    "application/x-7z-compressed": "7z",
    "application/vnd.rar": "rar",
    "application/x-bzip2": "bz2",
    "application/x-xz": "xz",
    "application/zstd": "zst",
    "application/epub+zip": "epub",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "xlsx",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "pptx",
    "application/vnd.apple.mpegurl": "m3u8",
    "application/dash+xml": "mpd",
    "model/gltf+json": "gltf",
    "model/gltf-binary": "glb",
    "model/obj": "obj",
    "model/stl": "stl",
    "text/x-python": "py",
    "application/sql": "sql",
    "application/x-bittorrent": "torrent",
}


def normalise_extension(extension: str) -> str:
    """Lowercase an extension and drop any leading dots."""
    return extension.strip().lower().lstrip(".")


def mime_from_extension(extension: str) -> str:
    """Return the MIME type for ``extension``, or the generic binary type."""
    return _EXTENSION_TO_MIME.get(normalise_extension(extension), DEFAULT_MIME)


def extension_from_mime(mime: str) -> str:
    """Return a file extension for ``mime``.

    Unknown types fall back to the MIME subtype (``application/x-foo`` gives
    ``x-foo``) and finally to ``txt``. Media-type parameters such as
    ``; charset=utf-8`` are ignored.
    """
    essence = mime.split(";", 1)[0].strip().lower()
    known = _MIME_TO_EXTENSION.get(essence)
    if known:
        return known
    _, _, subtype = essence.partition("/")
    return subtype.strip() or DEFAULT_EXTENSION


def known_extensions() -> frozenset[str]:
    return frozenset(_EXTENSION_TO_MIME)


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_MIME",
    "extension_from_mime",
    "known_extensions",
    "mime_from_extension",
    "normalise_extension",
]
