"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
The Stern-Brocot tree of irreducible fractions.

The tree is built progressively: nodes are created on demand when a fraction
or a descendant is requested. Each node stores its fraction p/q, the last
partial quotient u and the depth k of its continued fraction
[u_0; u_1, ..., u_k], and the indices of its two ascendants (the fractions it
is the mediant of), its two descendants and its inverse q/p.

Nodes live in an arena (a list) and refer to each other by index, so
navigation is O(1) and there is no ownership cycle to manage. A process-wide
arena is created lazily by SternBrocot.instance(); it holds the roots
0/1 (k = 0), 1/0 (k = -1) and 1/1 (k = 0).
"""

import threading
from math import gcd

from .integer_vector import to_integer

ZERO_OVER_ONE = 0
ONE_OVER_ZERO = 1
ONE_OVER_ONE = 2


class Node:
    """One fraction of the tree. Links are arena indices or None."""

    __slots__ = (
        "p",
        "q",
        "u",
        "k",
        "ascendant_left",
        "ascendant_right",
        "descendant_left",
        "descendant_right",
        "inverse",
    )

    def __init__(self, p, q, u, k, ascendant_left, ascendant_right, inverse=None):
        self.p = p
        self.q = q
        self.u = u
        self.k = k
        self.ascendant_left = ascendant_left
        self.ascendant_right = ascendant_right
        self.descendant_left = None
        self.descendant_right = None
        self.inverse = inverse

    def __repr__(self):
        return f"Node({self.p}/{self.q}, u={self.u}, k={self.k})"


class SternBrocot:
    """
    Arena holding the explored part of the Stern-Brocot tree.

    Use SternBrocot.instance() to share one tree in the process. Node creation
    is serialized by a lock; reading existing nodes needs no lock since nodes
    are never removed and their links, once set, never change.
    """

    _instance = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._lock = threading.RLock()
        self._nodes = [
            Node(0, 1, 0, 0, None, ONE_OVER_ZERO, inverse=ONE_OVER_ZERO),
            Node(1, 0, 0, -1, ZERO_OVER_ONE, None, inverse=ZERO_OVER_ONE),
            Node(1, 1, 1, 0, ZERO_OVER_ONE, ONE_OVER_ZERO, inverse=ONE_OVER_ONE),
        ]

    @classmethod
    def instance(cls):
        """The process-wide tree, created on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def node(self, index):
        return self._nodes[index]

    def nb_fractions(self):
        """Number of fractions created so far."""
        return len(self._nodes)

    def zero_over_one(self):
        return SternBrocotFraction(self, ZERO_OVER_ONE)

    def one_over_zero(self):
        return SternBrocotFraction(self, ONE_OVER_ZERO)

    def one_over_one(self):
        return SternBrocotFraction(self, ONE_OVER_ONE)

    def _make_child(self, index, right):
        node = self._nodes[index]
        if right:
            left_asc, right_asc = index, node.ascendant_right
        else:
            left_asc, right_asc = node.ascendant_left, index
        a, b = self._nodes[left_asc], self._nodes[right_asc]

        # [u_0, ..., u_k] has children [u_0, ..., u_k + 1] and
        # [u_0, ..., u_k - 1, 2]; the first one is on the right for even k.
        if right == (node.k % 2 == 0):
            u, k = node.u + 1, node.k
        else:
            u, k = 2, node.k + 1

        self._nodes.append(Node(a.p + b.p, a.q + b.q, u, k, left_asc, right_asc))
        return len(self._nodes) - 1

    def _link(self, index, right, child):
        node = self._nodes[index]
        if right:
            node.descendant_right = child
        else:
            node.descendant_left = child

    def child(self, index, right):
        """
        Index of the left or right descendant, created if needed.

        The mirrored descendant of the inverse node is created at the same
        time so that inverse links are always available.
        """
        node = self._nodes[index]
        existing = node.descendant_right if right else node.descendant_left
        if existing is not None:
            return existing
        if index in (ZERO_OVER_ONE, ONE_OVER_ZERO):
            raise ValueError("0/1 and 1/0 have no descendants; start from 1/1")

        with self._lock:
            existing = node.descendant_right if right else node.descendant_left
            if existing is not None:
                return existing
            created = self._make_child(index, right)
            mirrored = self._make_child(node.inverse, not right)
            self._nodes[created].inverse = mirrored
            self._nodes[mirrored].inverse = created
            # publish only fully linked nodes
            self._link(node.inverse, not right, mirrored)
            self._link(index, right, created)
            return created

    @staticmethod
    def _strictly_between(p, q, low, high):
        return low.p * q < p * low.q and p * high.q < high.p * q

    def fraction(self, p, q, ancestor=None):
        """
        The fraction p/q, with p, q >= 0 and gcd(p, q) = 1.

        Complexity is bounded by the sum of the partial quotients of p/q.

        Parameters:
        - p (int): numerator.
        - q (int): denominator.
        - ancestor (SternBrocotFraction): optional ancestor of p/q used as the
          starting point of the descent.

        Raises:
        - ValueError: for negative or non-reduced numerator and denominator.
        """
        p, q = to_integer(p), to_integer(q)
        if p < 0 or q < 0:
            raise ValueError(f"Fraction {p}/{q} must have non-negative terms")
        if gcd(p, q) != 1:
            raise ValueError(f"Fraction {p}/{q} is not irreducible")
        if (p, q) == (0, 1):
            return self.zero_over_one()
        if (p, q) == (1, 0):
            return self.one_over_zero()

        index = ONE_OVER_ONE
        if (
            ancestor is not None
            and ancestor._tree is self
            and ancestor._index not in (None, ZERO_OVER_ONE, ONE_OVER_ZERO)
        ):
            node = self._nodes[ancestor._index]
            low = self._nodes[node.ascendant_left]
            high = self._nodes[node.ascendant_right]
            if self._strictly_between(p, q, low, high):
                index = ancestor._index

        while True:
            node = self._nodes[index]
            difference = p * node.q - q * node.p
            if difference == 0:
                return SternBrocotFraction(self, index)
            index = self.child(index, difference > 0)

    def is_valid(self):
        return len(self._nodes) >= 3 and self._nodes[ONE_OVER_ONE].inverse == ONE_OVER_ONE


class SternBrocotFraction:
    """
    Handle on a node of a Stern-Brocot tree.

    A handle with no node is the null fraction 0/0.
    """

    __slots__ = ("_tree", "_index")

    def __init__(self, tree=None, index=None):
        self._tree = tree
        self._index = index

    def _node(self):
        if self._index is None:
            raise ValueError("The null fraction has no node")
        return self._tree.node(self._index)

    def _wrap(self, index):
        return SternBrocotFraction(self._tree if index is not None else None, index)

    def null(self):
        return self._index is None

    @property
    def p(self):
        return 0 if self.null() else self._node().p

    @property
    def q(self):
        return 0 if self.null() else self._node().q

    @property
    def u(self):
        return self._node().u

    @property
    def k(self):
        return self._node().k

    def left(self):
        return self._wrap(self._tree.child(self._index, False))

    def right(self):
        return self._wrap(self._tree.child(self._index, True))

    def even(self):
        return self.k % 2 == 0

    def odd(self):
        return self.k % 2 == 1

    def _ascendants(self):
        node = self._node()
        return [
            i for i in (node.ascendant_left, node.ascendant_right) if i is not None
        ]

    def father(self, m=None):
        """
        [u_0, ..., u_k] => [u_0, ..., u_k - 1], in O(1).

        With m (1 <= m <= u_k), returns [u_0, ..., u_{k-1}, m] in O(u_k - m).
        The roots 0/1 and 1/0 have the null fraction as father.
        """
        if m is not None:
            if not 1 <= m <= self.u:
                raise ValueError(f"Quotient {m} must lie in [1, {self.u}]")
            fraction = self
            for _ in range(self.u - m):
                fraction = fraction.father()
            return fraction

        if self._index in (ZERO_OVER_ONE, ONE_OVER_ZERO):
            return SternBrocotFraction()
        node = self._node()
        a = self._tree.node(node.ascendant_left)
        b = self._tree.node(node.ascendant_right)
        # father is the younger ascendant; ties only happen at 1/1
        if b.p + b.q > a.p + a.q:
            return self._wrap(node.ascendant_right)
        return self._wrap(node.ascendant_left)

    def previous_partial(self):
        """
        [u_0, ..., u_{k-1}, u_k] => [u_0, ..., u_{k-1}], in O(1).

        This is the ascendant with the smaller depth. When u_{k-1} == 1 the
        result is stored in its canonical form [u_0, ..., u_{k-2} + 1], so
        its depth may be k - 2.
        """
        ascendants = self._ascendants()
        if len(ascendants) == 1:
            return self._wrap(ascendants[0])
        a, b = (self._tree.node(i) for i in ascendants)
        if a.p + a.q < b.p + b.q:
            return self._wrap(ascendants[0])
        return self._wrap(ascendants[1])

    def inverse(self):
        """q/p, in O(1)."""
        return self._wrap(self._node().inverse)

    def partial(self, kp):
        """
        The partial fraction [u_0, ..., u_kp] for -2 <= kp <= k.

        By convention the partial of depth -1 is 1/0 and the one of depth -2
        is 0/1.
        """
        if not -2 <= kp <= self.k:
            raise ValueError(f"Depth {kp} must lie in [-2, {self.k}]")
        if kp == self.k:
            return self
        if kp == -2:
            return self._tree.zero_over_one()
        if kp == -1:
            return self._tree.one_over_zero()
        p0, q0, p1, q1 = 0, 1, 1, 0
        for u in self.cfrac()[: kp + 1]:
            p0, q0, p1, q1 = p1, q1, u * p1 + p0, u * q1 + q0
        return self._tree.fraction(p1, q1)

    def reduced(self, i):
        """The partial fraction [u_0, ..., u_{k-i}]."""
        return self.partial(self.k - i)

    def split(self):
        """
        Return (f1, f2) such that this fraction is their mediant.

        Not defined for 0/1 and 1/0.
        """
        if self._index in (ZERO_OVER_ONE, ONE_OVER_ZERO):
            raise ValueError("0/1 and 1/0 cannot be split")
        node = self._node()
        return self._wrap(node.ascendant_left), self._wrap(node.ascendant_right)

    def split_berstel(self):
        """
        Return (f1, nb1, f2, nb2) with p/q = nb1 * f1 (+) nb2 * f2.

        nb1 == 1 when k is even, nb2 == 1 when k is odd.
        """
        if self._index in (ZERO_OVER_ONE, ONE_OVER_ZERO):
            raise ValueError("0/1 and 1/0 cannot be split")
        previous = self.reduced(1)
        before = self.reduced(2)
        if self.even():
            return before, 1, previous, self.u
        return previous, self.u, before, 1

    def cfrac(self):
        """Partial quotients [u_0, ..., u_k] of the continued fraction."""
        p, q = self.p, self.q
        quotients = []
        while q != 0:
            quotient, remainder = divmod(p, q)
            quotients.append(quotient)
            p, q = q, remainder
        return quotients

    def mediant(self, other):
        return self._tree.fraction(self.p + other.p, self.q + other.q)

    def equals(self, p1, q1):
        return self.p == p1 and self.q == q1

    def less_than(self, p1, q1):
        return self.p * q1 < p1 * self.q

    def more_than(self, p1, q1):
        return self.p * q1 > p1 * self.q

    def __eq__(self, other):
        if not isinstance(other, SternBrocotFraction):
            return NotImplemented
        return self.p == other.p and self.q == other.q

    def __hash__(self):
        return hash((self.p, self.q))

    def __lt__(self, other):
        return self.less_than(other.p, other.q)

    def __gt__(self, other):
        return self.more_than(other.p, other.q)

    def __repr__(self):
        if self.null():
            return "[0/0]"
        return f"[{self.p}/{self.q} u={self.u} k={self.k}]"


SternBrocot.Fraction = SternBrocotFraction


def fraction(p, q, ancestor=None):
    """The fraction p/q in the process-wide Stern-Brocot tree."""
    return SternBrocot.instance().fraction(p, q, ancestor)
