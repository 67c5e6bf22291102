"""Static MIME type table and lookups.

Keys are lower-case filename-extension-like names, matched exactly.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import InvalidArgument
from .types import MimeType
from .validation import not_none

_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "mme": "application/base64",
        "boo": "application/book",
        "book": "application/book",
        "ccad": "application/clariscad",
        "dp": "application/commonground",
        "drw": "application/drafting",
        "xl": "application/excel",
        "frl": "application/freeloader",
        "spl": "application/futuresplash",
        "vew": "application/groupwise",
        "hta": "application/hta",
        "unv": "application/i-deas",
        "inf": "application/inf",
        "mrc": "application/marc",
        "mbd": "application/mbedlet",
        "aps": "application/mime",
        "ppz": "application/mspowerpoint",
        "doc": "application/msword",
        "dot": "application/msword",
        "w6w": "application/msword",
        "word": "application/msword",
        "wiz": "application/msword",
        "mcp": "application/netmc",
        "json": "application/json",
        "www-form": "application/x-www-form-urlencoded",
        "o": "application/octet-stream",
        "dump": "application/octet-stream",
        "exe": "application/octet-stream",
        "saveme": "application/octet-stream",
        "arc": "application/octet-stream",
        "arj": "application/octet-stream",
        "lhx": "application/octet-stream",
        "psd": "application/octet-stream",
        "zoo": "application/octet-stream",
        "oda": "application/oda",
        "pdf": "application/pdf",
        "p7s": "application/pkcs7-signature",
        "crl": "application/pkix-crl",
        "ai": "application/postscript",
        "eps": "application/postscript",
        "ps": "application/postscript",
        "prt": "application/pro_eng",
        "part": "application/pro_eng",
        "set": "application/set",
        "smil": "application/smil",
        "smi": "application/smil",
        "sol": "application/solids",
        "sdr": "application/sounder",
        "stp": "application/step",
        "step": "application/step",
        "ssm": "application/streamingmedia",
        "vda": "application/vda",
        "fdf": "application/vnd.fdf",
        "hpg": "application/vnd.hp-hpgl",
        "hgl": "application/vnd.hp-hpgl",
        "hpgl": "application/vnd.hp-hpgl",
        "sst": "application/vnd.ms-pki.certstore",
        "pko": "application/vnd.ms-pki.pko",
        "cat": "application/vnd.ms-pki.seccat",
        "pot": "application/vnd.ms-powerpoint",
        "ppa": "application/vnd.ms-powerpoint",
        "pps": "application/vnd.ms-powerpoint",
        "pwz": "application/vnd.ms-powerpoint",
        "mpp": "application/vnd.ms-project",
        "ncm": "application/vnd.nokia.configuration-message",
        "rng": "application/vnd.nokia.ringing-tone",
        "rnx": "application/vnd.rn-realplayer",
        "wmlc": "application/vnd.wap.wmlc",
        "wmlsc": "application/vnd.wap.wmlscriptc",
        "web": "application/vnd.xara",
        "vmd": "application/vocaltec-media-desc",
        "vmf": "application/vocaltec-media-file",
        "wp6": "application/wordperfect",
        "wp": "application/wordperfect",
        "wp5": "application/wordperfect6.0",
        "w60": "application/wordperfect6.0",
        "w61": "application/wordperfect6.1",
        "wk1": "application/x-123",
        "aim": "application/x-aim",
        "aas": "application/x-authorware-seg",
        "bcpio": "application/x-bcpio",
        "bsh": "application/x-bsh",
        "pyc": "application/x-bytecode.python",
        "bz": "application/x-bzip",
        "boz": "application/x-bzip2",
        "bz2": "application/x-bzip2",
        "vcd": "application/x-cdlink",
        "cha": "application/x-chat",
        "chat": "application/x-chat",
        "cco": "application/x-cocoa",
        "tgz": "application/x-compressed",
        "z": "application/x-compressed",
        "nsc": "application/x-conference",
        "cpio": "application/x-cpio",
        "cpt": "application/x-cpt",
        "deepv": "application/x-deepv",
        "dir": "application/x-director",
        "dxr": "application/x-director",
        "dcr": "application/x-director",
        "dvi": "application/x-dvi",
        "elc": "application/x-elc",
        "env": "application/x-envoy",
        "evy": "application/x-envoy",
        "es": "application/x-esrehber",
        "xlt": "application/x-excel",
        "xlv": "application/x-excel",
        "xlc": "application/x-excel",
        "xlb": "application/x-excel",
        "xld": "application/x-excel",
        "xlk": "application/x-excel",
        "xlm": "application/x-excel",
        "xll": "application/x-excel",
        "pre": "application/x-freelance",
        "gsp": "application/x-gsp",
        "gss": "application/x-gss",
        "gtar": "application/x-gtar",
        "gz": "application/x-gzip",
        "hdf": "application/x-hdf",
        "help": "application/x-helpfile",
        "imap": "application/x-httpd-imap",
        "ima": "application/x-ima",
        "ins": "application/x-internett-signup",
        "iv": "application/x-inventor",
        "ip": "application/x-ip2",
        "class": "application/x-java-class",
        "jcm": "application/x-java-commerce",
        "skd": "application/x-koan",
        "skm": "application/x-koan",
        "skp": "application/x-koan",
        "skt": "application/x-koan",
        "latex": "application/x-latex",
        "ltx": "application/x-latex",
        "lha": "application/x-lha",
        "ivy": "application/x-livescreen",
        "wq1": "application/x-lotus",
        "lzh": "application/x-lzh",
        "lzx": "application/x-lzx",
        "hqx": "application/x-mac-binhex40",
        "bin": "application/x-macbinary",
        "mc$": "application/x-magic-cap-package-1.0",
        "mcd": "application/x-mathcad",
        "mm": "application/x-meme",
        "mif": "application/x-mif",
        "nix": "application/x-mix-transfer",
        "xlw": "application/x-msexcel",
        "xla": "application/x-msexcel",
        "xls": "application/x-msexcel",
        "ppt": "application/x-mspowerpoint",
        "ani": "application/x-navi-animation",
        "nvd": "application/x-navidoc",
        "map": "application/x-navimap",
        "stl": "application/x-navistyle",
        "cdf": "application/x-netcdf",
        "nc": "application/x-netcdf",
        "pkg": "application/x-newton-compatible-pkg",
        "aos": "application/x-nokia-9000-communicator-add-on-software",
        "omc": "application/x-omc",
        "omcd": "application/x-omcdatamaker",
        "omcr": "application/x-omcregerator",
        "pm4": "application/x-pagemaker",
        "pm5": "application/x-pagemaker",
        "pcl": "application/x-pcl",
        "plx": "application/x-pixclscript",
        "p10": "application/x-pkcs10",
        "p12": "application/x-pkcs12",
        "p7r": "application/x-pkcs7-certreqresp",
        "p7c": "application/x-pkcs7-mime",
        "p7m": "application/x-pkcs7-mime",
        "p7a": "application/x-pkcs7-signature",
        "mpc": "application/x-project",
        "mpt": "application/x-project",
        "mpv": "application/x-project",
        "mpx": "application/x-project",
        "wb1": "application/x-qpro",
        "sdp": "application/x-sdp",
        "sea": "application/x-sea",
        "sl": "application/x-seelogo",
        "shar": "application/x-shar",
        "swf": "application/x-shockwave-flash",
        "sprite": "application/x-sprite",
        "spr": "application/x-sprite",
        "sit": "application/x-stuffit",
        "sv4cpio": "application/x-sv4cpio",
        "sv4crc": "application/x-sv4crc",
        "tar": "application/x-tar",
        "tbk": "application/x-tbook",
        "sbk": "application/x-tbook",
        "tex": "application/x-tex",
        "texi": "application/x-texinfo",
        "texinfo": "application/x-texinfo",
        "t": "application/x-troff",
        "tr": "application/x-troff",
        "roff": "application/x-troff",
        "man": "application/x-troff-man",
        "me": "application/x-troff-me",
        "ms": "application/x-troff-ms",
        "vsd": "application/x-visio",
        "vst": "application/x-visio",
        "vsw": "application/x-visio",
        "mzz": "application/x-vnd.audioexplosion.mzz",
        "xpix": "application/x-vnd.ls-xpix",
        "src": "application/x-wais-source",
        "wsrc": "application/x-wais-source",
        "hlp": "application/x-winhelp",
        "wtk": "application/x-wintalk",
        "wpd": "application/x-wpwin",
        "wri": "application/x-wri",
        "der": "application/x-x509-ca-cert",
        "cer": "application/x-x509-ca-cert",
        "crt": "application/x-x509-user-cert",
        "it": "audio/it",
        "my": "audio/make",
        "funk": "audio/make",
        "pfunk": "audio/make.my.funk",
        "rmi": "audio/mid",
        "mpga": "audio/mpeg",
        "m2a": "audio/mpeg",
        "s3m": "audio/s3m",
        "tsi": "audio/tsp-audio",
        "tsp": "audio/tsplayer",
        "qcp": "audio/vnd.qcelp",
        "vox": "audio/voxware",
        "snd": "audio/x-adpcm",
        "aif": "audio/x-aiff",
        "aiff": "audio/x-aiff",
        "aifc": "audio/x-aiff",
        "au": "audio/x-au",
        "gsd": "audio/x-gsm",
        "gsm": "audio/x-gsm",
        "jam": "audio/x-jam",
        "lam": "audio/x-liveaudio",
        "mod": "audio/x-mod",
        "m3u": "audio/x-mpequrl",
        "la": "audio/x-nspaudio",
        "lma": "audio/x-nspaudio",
        "ram": "audio/x-pn-realaudio",
        "rmm": "audio/x-pn-realaudio",
        "rm": "audio/x-pn-realaudio",
        "rmp": "audio/x-pn-realaudio-plugin",
        "rpm": "audio/x-pn-realaudio-plugin",
        "sid": "audio/x-psid",
        "ra": "audio/x-realaudio",
        "vqf": "audio/x-twinvq",
        "vqe": "audio/x-twinvq-plugin",
        "vql": "audio/x-twinvq-plugin",
        "mjf": "audio/x-vnd.audioexplosion.mjuicemediafile",
        "voc": "audio/x-voc",
        "wav": "audio/x-wav",
        "xm": "audio/xm",
        "pdb": "chemical/x-pdb",
        "xyz": "chemical/x-pdb",
        "ivr": "i-world/i-vrml",
        "bm": "image/bmp",
        "rast": "image/cmu-raster",
        "fif": "image/fif",
        "flo": "image/florian",
        "turbot": "image/florian",
        "g3": "image/g3fax",
        "gif": "image/gif",
        "ief": "image/ief",
        "iefs": "image/ief",
        "jfif-tbnl": "image/jpeg",
        "jut": "image/jutvision",
        "naplps": "image/naplps",
        "nap": "image/naplps",
        "pict": "image/pict",
        "pic": "image/pict",
        "jpeg": "image/pjpeg",
        "jfif": "image/pjpeg",
        "jpe": "image/pjpeg",
        "jpg": "image/pjpeg",
        "x-png": "image/png",
        "png": "image/png",
        "fpx": "image/vnd.net-fpx",
        "rf": "image/vnd.rn-realflash",
        "rp": "image/vnd.rn-realpix",
        "wbmp": "image/vnd.wap.wbmp",
        "xif": "image/vnd.xiff",
        "ras": "image/x-cmu-raster",
        "dwg": "image/x-dwg",
        "dxf": "image/x-dwg",
        "svf": "image/x-dwg",
        "ico": "image/x-icon",
        "art": "image/x-jg",
        "jps": "image/x-jps",
        "nif": "image/x-niff",
        "niff": "image/x-niff",
        "pcx": "image/x-pcx",
        "pct": "image/x-pict",
        "pnm": "image/x-portable-anymap",
        "pbm": "image/x-portable-bitmap",
        "pgm": "image/x-portable-greymap",
        "ppm": "image/x-portable-pixmap",
        "qif": "image/x-quicktime",
        "qti": "image/x-quicktime",
        "qtif": "image/x-quicktime",
        "rgb": "image/x-rgb",
        "tif": "image/x-tiff",
        "tiff": "image/x-tiff",
        "bmp": "image/x-windows-bmp",
        "xwd": "image/x-xwindowdump",
        "xbm": "image/xbm",
        "xpm": "image/xpm",
        "mht": "message/rfc822",
        "mhtml": "message/rfc822",
        "iges": "model/iges",
        "igs": "model/iges",
        "dwf": "model/vnd.dwf",
        "pov": "model/x-pov",
        "gzip": "multipart/x-gzip",
        "ustar": "multipart/x-ustar",
        "zip": "multipart/x-zip",
        "kar": "music/x-karaoke",
        "pvu": "paleovu/x-pv",
        "asp": "text/asp",
        "css": "text/css",
        "js": "text/ecmascript",
        "acgi": "text/html",
        "htm": "text/html",
        "htx": "text/html",
        "html": "text/html",
        "htmls": "text/html",
        "mcf": "text/mcf",
        "pas": "text/pascal",
        "def": "text/plain",
        "g": "text/plain",
        "list": "text/plain",
        "c++": "text/plain",
        "text": "text/plain",
        "mar": "text/plain",
        "com": "text/plain",
        "txt": "text/plain",
        "cxx": "text/plain",
        "idc": "text/plain",
        "conf": "text/plain",
        "log": "text/plain",
        "sdml": "text/plain",
        "lst": "text/plain",
        "rtf": "text/richtext",
        "rtx": "text/richtext",
        "wsc": "text/scriplet",
        "tsv": "text/tab-separated-values",
        "uris": "text/uri-list",
        "uni": "text/uri-list",
        "uri": "text/uri-list",
        "unis": "text/uri-list",
        "abc": "text/vnd.abc",
        "flx": "text/vnd.fmi.flexstor",
        "rt": "text/vnd.rn-realtext",
        "wml": "text/vnd.wap.wml",
        "wmls": "text/vnd.wap.wmlscript",
        "htt": "text/webviewhtml",
        "s": "text/x-asm",
        "asm": "text/x-asm",
        "aip": "text/x-audiosoft-intra",
        "cc": "text/x-c",
        "c": "text/x-c",
        "cpp": "text/x-c",
        "htc": "text/x-component",
        "f": "text/x-fortran",
        "for": "text/x-fortran",
        "f77": "text/x-fortran",
        "f90": "text/x-fortran",
        "h": "text/x-h",
        "hh": "text/x-h",
        "java": "text/x-java-source",
        "jav": "text/x-java-source",
        "lsx": "text/x-la-asf",
        "m": "text/x-m",
        "p": "text/x-pascal",
        "hlb": "text/x-script",
        "csh": "text/x-script.csh",
        "el": "text/x-script.elisp",
        "ksh": "text/x-script.ksh",
        "lsp": "text/x-script.lisp",
        "pl": "text/x-script.perl",
        "pm": "text/x-script.perl-module",
        "py": "text/x-script.phyton",
        "rexx": "text/x-script.rexx",
        "sh": "text/x-script.sh",
        "tcl": "text/x-script.tcl",
        "tcsh": "text/x-script.tcsh",
        "zsh": "text/x-script.zsh",
        "shtml": "text/x-server-parsed-html",
        "ssi": "text/x-server-parsed-html",
        "etx": "text/x-setext",
        "sgm": "text/x-sgml",
        "sgml": "text/x-sgml",
        "talk": "text/x-speech",
        "spc": "text/x-speech",
        "uil": "text/x-uil",
        "uue": "text/x-uuencode",
        "uu": "text/x-uuencode",
        "vcs": "text/x-vcalendar",
        "xml": "text/xml",
        "afl": "video/animaflex",
        "avs": "video/avs-video",
        "mpeg": "video/mpeg",
        "mpa": "video/mpeg",
        "mpe": "video/mpeg",
        "mpg": "video/mpeg",
        "m1v": "video/mpeg",
        "m2v": "video/mpeg",
        "qt": "video/quicktime",
        "mov": "video/quicktime",
        "moov": "video/quicktime",
        "vdo": "video/vdo",
        "rv": "video/vnd.rn-realvideo",
        "viv": "video/vnd.vivo",
        "vivo": "video/vnd.vivo",
        "vos": "video/vosaic",
        "xdr": "video/x-amt-demorun",
        "xsr": "video/x-amt-showrun",
        "fmf": "video/x-atomic3d-feature",
        "dl": "video/x-dl",
        "dif": "video/x-dv",
        "dv": "video/x-dv",
        "fli": "video/x-fli",
        "gl": "video/x-gl",
        "isu": "video/x-isvideo",
        "mjpg": "video/x-motion-jpeg",
        "mp3": "video/x-mpeg",
        "mp2": "video/x-mpeq2a",
        "asf": "video/x-ms-asf",
        "asx": "video/x-ms-asf-plugin",
        "avi": "video/x-msvideo",
        "qtc": "video/x-qtc",
        "scm": "video/x-scm",
        "movie": "video/x-sgi-movie",
        "mv": "video/x-sgi-movie",
        "wmf": "windows/metafile",
        "mime": "www/mime",
        "ice": "x-conference/x-cooltalk",
        "mid": "x-music/x-midi",
        "midi": "x-music/x-midi",
        "qd3": "x-world/x-3dmf",
        "qd3d": "x-world/x-3dmf",
        "svr": "x-world/x-svr",
        "wrl": "x-world/x-vrml",
        "wrz": "x-world/x-vrml",
        "vrml": "x-world/x-vrml",
        "vrt": "x-world/x-vrt",
        "xgz": "xgl/drawing",
        "xmz": "xgl/movie",
    }
)

_TYPES: tuple[MimeType, ...] = tuple(
    MimeType(key, value) for key, value in _MIME_TYPES.items()
)


class MimeLookup:
    """Read-only access to the bundled MIME table."""

    @staticmethod
    def get(key: str) -> str:
        """Return the MIME string for ``key``, e.g. ``"json"``.

        Raises:
            InvalidArgument: If the key is None or unknown.
        """
        return MimeLookup.mime_type(key).value

    @staticmethod
    def mime_type(key: str) -> MimeType:
        not_none(key, "Cannot get mime type from null key")
        value = _MIME_TYPES.get(key)
        if value is None:
            raise InvalidArgument(f"Cannot resolve mime type {key}")
        return MimeType(key, value)

    @staticmethod
    def is_supported(key: str) -> bool:
        not_none(key, "Cannot get mime type from null key")
        return key in _MIME_TYPES

    @staticmethod
    def types() -> tuple[MimeType, ...]:
        return _TYPES
