"""Checkpoint 3: Encoder Verification."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest
from dfpwm.codec import DFPWMEncoder, quick_encode
from dfpwm.constants import STRENGTH_FLOOR, TARGET_HIGH, TARGET_LOW


def random_pcm(n, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(-128, 128, n).astype(np.int8)


def test_known_bytes():
    """Test hand-computed output bytes and state."""
    print("=" * 60)
    print("Test 1: Known Output")
    print("=" * 60)

    assert quick_encode(bytes([127]) * 8) == b'\xff'
    assert quick_encode(bytes([0x80]) * 8) == b'\x00'
    assert quick_encode(bytes([127, 0x80]) * 4) == b'\x55'
    print("   ✓ Rising, falling and alternating groups")

    # Final short group lands in the low bits
    assert quick_encode(bytes([127]) * 3) == b'\x07'
    print("   ✓ Final partial group right-aligned")

    encoder = DFPWMEncoder()
    encoder.encode(bytes([127]) * 8, final=True)
    print(f"   State: charge={encoder.charge}, strength={encoder.strength}")
    assert encoder.charge == 10
    assert encoder.strength == 15
    assert encoder.last_target == TARGET_HIGH

    print("✅ Known output test passed")


def test_length_contract():
    """Test output lengths for final and non-final calls."""
    print("\n" + "=" * 60)
    print("Test 2: Length Contract")
    print("=" * 60)

    for n in range(0, 41):
        pcm = random_pcm(n, seed=n)
        assert len(quick_encode(pcm)) == -(-n // 8)
        assert len(DFPWMEncoder().encode(pcm, final=False)) == n // 8
    print("   ✓ ceil(n/8) when final, floor(n/8) otherwise")

    print("✅ Length contract test passed")


def test_pending_carry():
    """Test partial groups are carried between calls."""
    print("\n" + "=" * 60)
    print("Test 3: Pending Carry")
    print("=" * 60)

    encoder = DFPWMEncoder()

    out = encoder.encode(bytes([127]) * 5)
    assert out == b''
    assert encoder.pending.size == 5
    assert encoder.charge == 0, "Pending samples must not touch the filter"
    print("   ✓ Short chunk buffered without output")

    out = encoder.encode(bytes([127]) * 5)
    assert out == b'\xff'
    assert encoder.pending.size == 2
    print("   ✓ Carried samples prepended to the next chunk")

    out = encoder.encode(bytes([127]) * 6)
    assert out == b'\xff'
    assert encoder.pending.size == 0
    print("   ✓ Pending cleared when the chunk ends on a group boundary")

    encoder.encode(bytes([127]) * 3)
    assert encoder.flush() == b'\x07'
    assert encoder.pending.size == 0
    print("   ✓ Flush emits the short final byte")

    print("✅ Pending carry test passed")


def test_empty_input():
    """Test empty input produces no output and no state change."""
    print("\n" + "=" * 60)
    print("Test 4: Empty Input")
    print("=" * 60)

    encoder = DFPWMEncoder()
    assert encoder.encode(b'', final=True) == b''
    assert encoder.encode(b'', final=False) == b''
    assert encoder.pending.size == 0
    assert (encoder.charge, encoder.strength, encoder.last_target) == (0, 0, TARGET_LOW)
    assert quick_encode(np.array([], dtype=np.int8)) == b''
    print("✅ Empty input test passed")


def test_chunk_invariance():
    """Test arbitrary chunking matches one-shot encoding."""
    print("\n" + "=" * 60)
    print("Test 5: Chunk Invariance")
    print("=" * 60)

    pcm = random_pcm(16, seed=42)
    encoder = DFPWMEncoder()
    streamed = encoder.encode(pcm[:10], final=False) + encoder.encode(pcm[10:], final=True)
    assert streamed == quick_encode(pcm)
    print("   ✓ [0:10] + [10:16] matches one-shot")

    pcm = random_pcm(1001, seed=7)
    reference = quick_encode(pcm)
    rng = np.random.default_rng(99)
    for trial in range(10):
        cuts = np.sort(rng.integers(0, pcm.size, rng.integers(1, 30)))
        pieces = np.split(pcm, cuts)
        encoder = DFPWMEncoder()
        parts = [encoder.encode(p, final=False) for p in pieces[:-1]]
        parts.append(encoder.encode(pieces[-1], final=True))
        assert b''.join(parts) == reference, f"Mismatch in trial {trial}"
    print("   ✓ 10 random chunkings match one-shot")

    print("✅ Chunk invariance test passed")


def test_determinism():
    """Test identical input and state give identical output."""
    print("\n" + "=" * 60)
    print("Test 6: Determinism")
    print("=" * 60)

    pcm = random_pcm(500, seed=3)
    assert quick_encode(pcm) == quick_encode(pcm.tobytes())
    assert quick_encode(pcm) == quick_encode(pcm.astype(np.int16))

    a = DFPWMEncoder(charge=20, strength=100, last_target=127)
    b = DFPWMEncoder(charge=20, strength=100, last_target=127)
    assert a.encode(pcm, final=True) == b.encode(pcm, final=True)
    print("✅ Determinism test passed")


def test_constant_input_saturates():
    """Test constant full-scale input locks the charge at the rail."""
    print("\n" + "=" * 60)
    print("Test 7: Rail Saturation")
    print("=" * 60)

    encoder = DFPWMEncoder()
    out = encoder.encode(bytes([127]) * 2048, final=True)
    assert encoder.charge == TARGET_HIGH
    assert out[-16:] == b'\xff' * 16
    print("   ✓ +127 input: charge locks at 127 (tie rises)")

    encoder = DFPWMEncoder()
    out = encoder.encode(bytes([0x80]) * 2048, final=True)
    assert encoder.charge == TARGET_LOW
    assert out == b'\x00' * 256
    assert encoder.strength >= STRENGTH_FLOOR
    print("   ✓ -128 input: charge locks at -128")

    print("✅ Rail saturation test passed")


def test_reset_and_process():
    """Test reset() and the stream-stage alias."""
    print("\n" + "=" * 60)
    print("Test 8: Reset and Process")
    print("=" * 60)

    pcm = random_pcm(21, seed=5)
    encoder = DFPWMEncoder()
    first = encoder.process(pcm, is_final=True)
    encoder.encode(pcm[:5])
    encoder.reset()
    assert encoder.pending.size == 0
    assert encoder.process(pcm, is_final=True) == first
    print("✅ Reset and process test passed")


def test_error_handling():
    """Test invalid arguments raise TypeError."""
    print("\n" + "=" * 60)
    print("Test 9: Error Handling")
    print("=" * 60)

    with pytest.raises(TypeError):
        DFPWMEncoder(charge='0')
    with pytest.raises(TypeError):
        DFPWMEncoder(strength=1.5)
    with pytest.raises(TypeError):
        DFPWMEncoder(last_target=[127])
    print("   ✓ Non-integer state rejected")

    encoder = DFPWMEncoder()
    with pytest.raises(TypeError):
        encoder.encode("not a buffer")
    with pytest.raises(TypeError):
        encoder.encode([1, 2, 3], final=True)
    with pytest.raises(ValueError):
        encoder.encode(np.array([300, 0]), final=True)
    print("   ✓ Non-buffer input rejected")

    print("✅ Error handling test passed")


def main():
    """Run all Checkpoint 3 tests."""
    print("\n" + "=" * 60)
    print("CHECKPOINT 3: ENCODER VERIFICATION")
    print("=" * 60 + "\n")

    tests = [
        ("Known Output", test_known_bytes),
        ("Length Contract", test_length_contract),
        ("Pending Carry", test_pending_carry),
        ("Empty Input", test_empty_input),
        ("Chunk Invariance", test_chunk_invariance),
        ("Determinism", test_determinism),
        ("Rail Saturation", test_constant_input_saturates),
        ("Reset and Process", test_reset_and_process),
        ("Error Handling", test_error_handling),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"❌ {name} failed: {e}")
            results.append((name, False))

    # Summary
    print("\n" + "=" * 60)
    print("CHECKPOINT 3 SUMMARY")
    print("=" * 60)

    all_passed = all(passed for _, passed in results)
    for name, passed in results:
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"   {name}: {status}")

    print("\n" + "=" * 60)
    if all_passed:
        print("🎉 CHECKPOINT 3 PASSED - All tests successful!")
    else:
        print("⚠️  CHECKPOINT 3 FAILED - Some tests did not pass")
    print("=" * 60 + "\n")

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
