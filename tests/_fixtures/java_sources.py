"""Java source samples and a helper for writing them to disk in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

USER_SERVICE = """\
@Service
public class UserService {
    private final UserRepository userRepository;

    public UserService(UserRepository userRepository) {
        this.userRepository = userRepository;
    }

    public User findById(Long id) {
        return userRepository.findById(id)
            .orElseThrow(() -> new RuntimeException("User not found"));
    }

    public List<User> findAll() {
        return userRepository.findAll();
    }

    public User save(User user) {
        return userRepository.save(user);
    }
}
"""

ORDER_SERVICE = """\
package com.example.orders;

import java.util.List;

@Service
@Transactional(readOnly = true)
public class OrderService {
    private final OrderRepository repository;
    private final OrderMapper mapper;

    public OrderDto placeOrder(Long customerId, List<Item> items) {
        return mapper.toDto(repository.save(new Order(customerId, items)));
    }

    public void cancel(Long orderId) {
        repository.deleteById(orderId);
    }

    public Order findByIdAndStatus(Long id, Status status) {
        return repository.findByIdAndStatus(id, status).orElseThrow();
    }
}
"""

PRICE_CALCULATOR = """\
public class PriceCalculator {
    private TaxPolicy taxPolicy;

    public BigDecimal computeTotal(Order order) {
        return order.subtotal().add(taxPolicy.taxFor(order));
    }

    public List<Price> findAll() {
        return List.of();
    }
}
"""

UNBALANCED = """\
public class Broken {
    public void run() {
        if (true) {
            System.out.println("missing braces");
    }
"""


class SourceWriter:
    """Writes Java sources into a throwaway directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "src"
        self.root.mkdir()

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path


__all__ = [
    "ORDER_SERVICE",
    "PRICE_CALCULATOR",
    "SourceWriter",
    "UNBALANCED",
    "USER_SERVICE",
]
