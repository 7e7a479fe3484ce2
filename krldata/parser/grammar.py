"""Data-list grammar routines.

    list  := [ data (',' data)* ]
    data  := [ name ] value
    name  := IDENT [ '[' ']' ]
    value := BOOL | INT | REAL | NAN | ENUM | STRING | CHAR | BITARRAY | struc
    struc := '{' [ IDENT ':' ] (data (',' data)*)? '}'
"""

from krldata.ast import (
    ARRAY_MARKER,
    BitArrayData,
    BoolData,
    CharData,
    DataObject,
    EnumData,
    IntData,
    RealData,
    StringData,
    StrucData,
    decode_bit_string,
    decode_bool,
    decode_enum,
    decode_int,
    decode_quoted,
    decode_real,
)
from krldata.errors import DuplicateStructMember, MalformedLiteral, UnexpectedEndOfInput, UnexpectedToken
from krldata.lexer import Token, TokenKind
from krldata.parser.parser import Parser


def parse_data_list(parser: Parser) -> list[DataObject]:
    data_list: list[DataObject] = []
    identifier_mandatory = parser.options.require_top_level_names

    while not parser.at(TokenKind.EOF):
        if parser.eat(TokenKind.COMMA) and parser.at(TokenKind.EOF):
            if parser.options.allow_trailing_comma and data_list:
                break
            raise parser.unexpected("data element")
        data_list.append(parse_data(parser, identifier_mandatory=identifier_mandatory))

    return data_list


def parse_data(parser: Parser, *, identifier_mandatory: bool) -> DataObject:
    if identifier_mandatory:
        if not parser.at(TokenKind.IDENTIFIER):
            raise parser.unexpected("identifier")
        # An identifier alone cannot form a data element.
        if parser.nth(1) == TokenKind.EOF:
            parser.bump()
            raise parser.unexpected("value")

    name = ""
    if parser.at(TokenKind.IDENTIFIER):
        name = parse_name(parser)

    return parse_value(parser, name)


def parse_name(parser: Parser) -> str:
    name = parser.expect(TokenKind.IDENTIFIER, "identifier").text

    if parser.eat(TokenKind.LBRACKET):
        parser.expect(TokenKind.RBRACKET, "']'")
        name += ARRAY_MARKER

    return name


def parse_value(parser: Parser, name: str) -> DataObject:
    token = parser.current_token

    match token.kind:
        case TokenKind.LBRACE:
            return parse_struc(parser, name)
        case TokenKind.EOF:
            raise UnexpectedEndOfInput("value", range=token.range)
        case TokenKind.IDENTIFIER | TokenKind.COMMA:
            raise UnexpectedToken("value", token.kind.name, text=token.text, range=token.range)
        case kind if kind.is_literal:
            parser.bump()
            try:
                return _decode_literal(token, name)
            except MalformedLiteral as exc:
                if exc.range is not None:
                    raise
                raise MalformedLiteral(exc.raw, exc.reason, range=token.range) from exc
        case _:
            raise UnexpectedToken("value", token.kind.name, text=token.text, range=token.range)


def parse_struc(parser: Parser, name: str) -> StrucData:
    opening = parser.expect(TokenKind.LBRACE, "'{'")

    struc_type = ""
    if parser.at(TokenKind.IDENTIFIER) and parser.nth(1) == TokenKind.COLON:
        struc_type = parser.bump().text
        parser.bump()

    members: dict[str, DataObject] = {}
    with parser.nested(opening):
        while True:
            if parser.at(TokenKind.EOF):
                raise parser.unexpected("'}'")

            if parser.at(TokenKind.RBRACE):
                if not members and not parser.options.allow_empty_struc:
                    raise parser.unexpected("struct member")
                parser.bump()
                break

            if parser.eat(TokenKind.COMMA):
                if members and parser.at(TokenKind.RBRACE) and parser.options.allow_trailing_comma:
                    continue

            member_range = parser.current_range
            member = parse_data(parser, identifier_mandatory=True)
            if member.name in members:
                raise DuplicateStructMember(member.name, range=member_range)
            members[member.name] = member

    return StrucData(members, struc_type=struc_type, name=name)


def _decode_literal(token: Token, name: str) -> DataObject:
    match token.kind:
        case TokenKind.BOOL:
            flag = decode_bool(token.text)
            if flag is not None:
                return BoolData(flag, name=name)
        case TokenKind.INT:
            number = decode_int(token.text)
            if number is not None:
                return IntData(number, name=name)
        case TokenKind.REAL | TokenKind.NAN:
            real = decode_real(token.text)
            if real is not None:
                return RealData(real, name=name)
        case TokenKind.ENUM:
            enum_value = decode_enum(token.text)
            if enum_value is not None:
                return EnumData(enum_value, name=name)
        case TokenKind.DOUBLE_QUOTED_STRING | TokenKind.SINGLE_QUOTED_STRING:
            text = decode_quoted(token.text)
            if text is not None:
                if len(text) == 1:
                    return CharData(text, name=name)
                return StringData(text, name=name)
        case TokenKind.BIT_STRING:
            bits = decode_bit_string(token.text)
            if bits is not None:
                return BitArrayData(bits, name=name)

    raise MalformedLiteral(token.text, f"not a well-formed {token.kind.name} literal", range=token.range)
