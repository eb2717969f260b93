import unittest
from Feistel_network import MalformedInputError, Mode, process
from feistel_cipher import FeistelCipher, decrypt, encrypt
from key_schedule import FixedKeySchedule, VERBOSE_KEYS, generate_keys
from tracing import RecordingObserver

SECRET = b"Secret!!"
SECRET_ENCRYPTED = bytes([0xE2, 0xD1, 0xC6, 0x17, 0x0F, 0x42, 0xF3, 0x13])


class TestFeistelCipher(unittest.TestCase):
    def test_encrypt_decrypt_defaults(self):
        encrypted = encrypt(SECRET)
        self.assertEqual(encrypted, SECRET_ENCRYPTED)
        self.assertEqual(decrypt(encrypted), SECRET)

    def test_wrappers_match_process(self):
        for rounds in (1, 3, 8, 16):
            with self.subTest(rounds=rounds):
                keys = generate_keys(rounds)
                self.assertEqual(encrypt(SECRET, rounds), process(SECRET, keys, Mode.FORWARD))
                self.assertEqual(decrypt(SECRET, rounds), process(SECRET, keys, Mode.INVERSE))
                self.assertEqual(decrypt(encrypt(SECRET, rounds), rounds), SECRET)

    def test_cipher_object(self):
        cipher = FeistelCipher()
        self.assertEqual(cipher.rounds, 4)
        encrypted = cipher.encrypt_block(SECRET)
        self.assertEqual(encrypted, SECRET_ENCRYPTED)
        self.assertEqual(cipher.decrypt_block(encrypted), SECRET)

    def test_reconfigure(self):
        cipher = FeistelCipher()
        cipher.configure(9)
        self.assertEqual(cipher.rounds, 9)
        self.assertEqual(cipher.encrypt_block(SECRET), encrypt(SECRET, 9))

    def test_fixed_schedule(self):
        cipher = FeistelCipher(rounds=4, ks=FixedKeySchedule(VERBOSE_KEYS))
        self.assertEqual(cipher.encrypt_block(SECRET), SECRET_ENCRYPTED)
        with self.assertRaises(ValueError):
            FeistelCipher(rounds=5, ks=FixedKeySchedule(VERBOSE_KEYS))

    def test_observer_is_attached(self):
        observer = RecordingObserver()
        cipher = FeistelCipher(rounds=6, observer=observer)
        cipher.decrypt_block(cipher.encrypt_block(SECRET))
        self.assertEqual(len(observer.events), 12)

    def test_odd_block_propagates(self):
        with self.assertRaises(MalformedInputError):
            encrypt(b"odd")
        with self.assertRaises(MalformedInputError):
            FeistelCipher().decrypt_block(b"1234567")


if __name__ == '__main__':
    unittest.main()
