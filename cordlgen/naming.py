"""Naming rules for generated Rust code: paths, identifiers and feature names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

_CPP_AND_RUST_WORDS = """
alignas alignof and and_eq asm atomic_cancel atomic_commit atomic_noexcept auto
bitand bitor bool break case catch char char8_t char16_t char32_t class compl
concept const consteval constexpr constinit const_cast continue co_await co_return
co_yield decltype default delete do double dynamic_cast else enum explicit export
extern false float for friend goto if inline int long mutable namespace new
noexcept not not_eq nullptr operator or or_eq private protected public reflexpr
register reinterpret_cast requires return short signed sizeof static static_assert
static_cast struct switch synchronized template this thread_local throw true try
typedef typeid typename union unsigned using virtual void volatile wchar_t while
xor xor_eq INT_MAX INT_MIN Assert bzero ID VERSION NULL EOF MOD_ID errno linux
module INFINITY NAN type size time clock rand srand exit match panic assert
debug_assert assert_eq assert_ne debug_assert_eq debug_assert_ne unreachable
unimplemented todo trait impl ref mut as use pub Ok Err ffi c_void c_char c_uchar
c_schar c_short c_ushort c_int c_uint c_long c_ulong c_longlong c_ulonglong
c_float c_double where Self async await move dyn super crate mod let fn in priv
box loop final macro override self gen _
"""

_ERRNO_NAMES = """
EPERM ENOENT ESRCH EINTR EIO ENXIO E2BIG ENOEXEC EBADF ECHILD EAGAIN ENOMEM EACCES
EFAULT ENOTBLK EBUSY EEXIST EXDEV ENODEV ENOTDIR EISDIR EINVAL ENFILE EMFILE
ENOTTY ETXTBSY EFBIG ENOSPC ESPIPE EROFS EMLINK EPIPE EDOM ERANGE EDEADLK
ENAMETOOLONG ENOLCK ENOSYS ENOTEMPTY ELOOP EWOULDBLOCK ENOMSG EIDRM ECHRNG
EL2NSYNC EL3HLT EL3RST ELNRNG EUNATCH ENOCSI EL2HLT EBADE EBADR EXFULL ENOANO
EBADRQC EBADSLT EDEADLOCK EBFONT ENOSTR ENODATA ETIME ENOSR ENONET ENOPKG EREMOTE
ENOLINK EADV ESRMNT ECOMM EPROTO EMULTIHOP EDOTDOT EBADMSG EOVERFLOW ENOTUNIQ
EBADFD EREMCHG ELIBACC ELIBBAD ELIBSCN ELIBMAX ELIBEXEC EILSEQ ERESTART ESTRPIPE
EUSERS ENOTSOCK EDESTADDRREQ EMSGSIZE EPROTOTYPE ENOPROTOOPT EPROTONOSUPPORT
ESOCKTNOSUPPORT EOPNOTSUPP EPFNOSUPPORT EAFNOSUPPORT EADDRINUSE EADDRNOTAVAIL
ENETDOWN ENETUNREACH ENETRESET ECONNABORTED ECONNRESET ENOBUFS EISCONN ENOTCONN
ESHUTDOWN ETOOMANYREFS ETIMEDOUT ECONNREFUSED EHOSTDOWN EHOSTUNREACH EALREADY
EINPROGRESS ESTALE EUCLEAN ENOTNAM ENAVAIL EISNAM EREMOTEIO EDQUOT ENOMEDIUM
EMEDIUMTYPE ECANCELED ENOKEY EKEYEXPIRED EKEYREVOKED EKEYREJECTED EOWNERDEAD
ENOTRECOVERABLE ERFKILL EHWPOISON ENOTSUP
"""

RESERVED_NAMES = frozenset(_CPP_AND_RUST_WORDS.split()) | frozenset(_ERRNO_NAMES.split())

EMPTY_NAME = "_cordl_fixed_empty_name_whitespace"
RESERVED_PREFIX = "_cordl_"

_PATH_CHARS = str.maketrans({c: "_" for c in "<>`/"})
_IDENT_CHARS = str.maketrans({c: "_" for c in "<`>/.:|,()*=$[]- &"})
_FEATURE_CHARS = str.maketrans({**{c: "_" for c in ":`<>$=,|"}, ".": "+", "/": "+"})


@dataclass(frozen=True)
class RustGenerationConfig:
    """Where generated Rust sources go and how names are made valid in them."""

    source_path: Path = field(default_factory=lambda: Path("./codegen-rs/src"))
    cargo_config: Path = field(default_factory=lambda: Path("./codegen-rs/Cargo.toml"))

    def namespace_rs(self, string: str) -> str:
        """Turn a dotted namespace into a ``crate::`` module path."""
        if not string:
            final_ns = "GlobalNamespace"
        else:
            final_ns = string.translate(_PATH_CHARS).replace(".", "::")
        return f"crate::{final_ns}"

    def name_rs(self, string: str) -> str:
        return self.name_rs_plus(string, ())

    def name_rs_plus(self, string: str, additional_exclude: Iterable[str] = ()) -> str:
        """Make ``string`` a usable identifier, escaping reserved or excluded words."""
        if not string.strip():
            return EMPTY_NAME
        if string in additional_exclude or string.lower() == "mod":
            return f"{RESERVED_PREFIX}{string}"
        if string in RESERVED_NAMES:
            return f"{RESERVED_PREFIX}{string}"
        return self.sanitize_to_rs_name(string)

    def sanitize_to_rs_name(self, string: str) -> str:
        """Replace punctuation with underscores and avoid a leading digit."""
        result = string.translate(_IDENT_CHARS)
        if result[:1].isnumeric():
            result = f"{RESERVED_PREFIX}{result}"
        return result

    def namespace_path(self, string: str) -> str:
        """Turn a dotted namespace into a relative directory path."""
        return string.translate(_PATH_CHARS).replace(".", "/")

    def feature_name(self, s: str) -> str:
        """Turn a full type name into a Cargo feature name."""
        return s.translate(_FEATURE_CHARS)


STATIC_CONFIG = RustGenerationConfig()