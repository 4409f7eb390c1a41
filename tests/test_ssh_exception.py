import pickle
import unittest

from sshkeys.ssh_exception import (
    FormatNotSupported,
    IncorrectPassphrase,
    InvalidContainer,
    InvalidKey,
    InvalidKeyLength,
    InvalidPEMBlock,
    KDFError,
    KeyLengthTooLarge,
    PassphraseRequired,
    SSHKeyError,
    UnknownCipherOrKdf,
    UnsupportedKeyType,
    WireFormatError,
)


class UnknownCipherOrKdfTest(unittest.TestCase):
    def test_message(self):
        exc = UnknownCipherOrKdf("3des-cbc", "bcrypt")
        self.assertEqual(str(exc), "unknown cipher/kdf: 3des-cbc:bcrypt")
        self.assertEqual(exc.cipher_name, "3des-cbc")
        self.assertEqual(exc.kdf_name, "bcrypt")

    def test_pickling(self):
        exc = UnknownCipherOrKdf("3des-cbc", "bcrypt")
        new_exc = pickle.loads(pickle.dumps(exc))
        self.assertEqual(type(exc), type(new_exc))
        self.assertEqual(str(exc), str(new_exc))
        self.assertEqual(exc.args, new_exc.args)


class UnsupportedKeyTypeTest(unittest.TestCase):
    def test_key_type(self):
        exc = UnsupportedKeyType("no thanks", key_type="ssh-foo")
        self.assertEqual(str(exc), "no thanks")
        self.assertEqual(exc.key_type, "ssh-foo")

    def test_key_type_optional(self):
        self.assertIsNone(UnsupportedKeyType("no thanks").key_type)

    def test_pickling(self):
        exc = FormatNotSupported("nope", key_type="ssh-ed25519")
        new_exc = pickle.loads(pickle.dumps(exc))
        self.assertEqual(type(exc), type(new_exc))
        self.assertEqual(str(exc), str(new_exc))


class HierarchyTest(unittest.TestCase):
    def test_everything_is_an_ssh_key_error(self):
        for cls in (
            IncorrectPassphrase,
            UnsupportedKeyType,
            UnknownCipherOrKdf,
            InvalidContainer,
            InvalidKey,
            KDFError,
        ):
            assert issubclass(cls, SSHKeyError)

    def test_passphrase_required_is_incorrect_passphrase(self):
        assert issubclass(PassphraseRequired, IncorrectPassphrase)

    def test_container_errors(self):
        assert issubclass(WireFormatError, InvalidContainer)
        assert issubclass(InvalidPEMBlock, InvalidContainer)

    def test_narrower_errors(self):
        assert issubclass(FormatNotSupported, UnsupportedKeyType)
        assert issubclass(InvalidKeyLength, InvalidKey)
        assert issubclass(KeyLengthTooLarge, KDFError)
