'''ASN.1 definitions for the PKCS#15 structures handled by pkcs15_core.

Records themselves (PrivateRSAKeyAttributes and friends) are not declared
here: they are walked element by element so that optional trailing members
and the extension marker can be handled explicitly.
'''

from pyasn1.type import univ, namedtype, tag


def context_tag(number, constructed=False):
    return tag.Tag(tag.tagClassContext,
                   tag.tagFormatConstructed if constructed else tag.tagFormatSimple,
                   number)


class Path(univ.Sequence):
    '''
    Path ::= SEQUENCE {
        efidOrPath OCTET STRING,
        index      INTEGER (0..pkcs15-ub-index) OPTIONAL,
        length     [0] INTEGER (0..pkcs15-ub-index) OPTIONAL
    }
    '''

    componentType = namedtype.NamedTypes(
        namedtype.NamedType('efidOrPath', univ.OctetString()),
        namedtype.OptionalNamedType('index', univ.Integer()),
        namedtype.OptionalNamedType('length', univ.Integer().subtype(
            implicitTag=context_tag(0))),
    )


RSA_COMPONENTS = ('modulus', 'publicExponent', 'privateExponent', 'prime1',
                  'prime2', 'exponent1', 'exponent2', 'coefficient')


class RSAPrivateKeyObject(univ.Sequence):
    '''Every member is an OPTIONAL [n] IMPLICIT INTEGER, n being its position.'''

    componentType = namedtype.NamedTypes(*[
        namedtype.OptionalNamedType(name, univ.Integer().subtype(implicitTag=context_tag(idx)))
        for idx, name in enumerate(RSA_COMPONENTS)
    ])


class ECPrivateKey(univ.Integer):
    pass


# PublicKeyOperations ::= Operations
class Operations(univ.BitString):
    pass


def direct(spec):
    '''The ``direct [0] Type`` alternative of ObjectValue (explicit, Type is open).'''
    return spec.subtype(explicitTag=context_tag(0, constructed=True))


def object_value(spec):
    '''
    ObjectValue {Type} ::= CHOICE {
        indirect ReferencedValue,
        direct   [0] Type,
        ...
    }
    '''
    return univ.Choice(componentType=namedtype.NamedTypes(
        namedtype.NamedType('indirect', Path()),
        namedtype.NamedType('direct', direct(spec)),
    ))


def params_and_ops(parameters):
    return univ.Sequence(componentType=namedtype.NamedTypes(
        namedtype.NamedType('parameters', parameters),
        namedtype.OptionalNamedType('supportedOperations', Operations()),
    ))


def key_info(parameters):
    '''
    KeyInfo {ParameterType, OperationsType} ::= CHOICE {
        reference    Reference,
        paramsAndOps SEQUENCE {
            parameters          ParameterType,
            supportedOperations OperationsType OPTIONAL
        }
    }
    '''
    return univ.Choice(componentType=namedtype.NamedTypes(
        namedtype.NamedType('reference', univ.Integer()),
        namedtype.NamedType('paramsAndOps', params_and_ops(parameters)),
    ))
