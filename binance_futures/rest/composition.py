"""
엔드포인트 그룹 합성

EndpointContract 테이블로부터 비동기 메서드를 생성하고,
여러 그룹을 하나의 클라이언트 클래스로 합칠 때 이름 충돌을 검사한다.

사용 예:
    class Market(EndpointGroup):
        contracts = (
            EndpointContract("depth", HttpMethod.GET, "/fapi/v1/depth", required=(SYMBOL,)),
        )

    class Futures(Account, Trade, Market, RestDispatcher):
        ...
"""

import inspect
from types import MappingProxyType
from typing import Any, Callable, Mapping

from binance_futures.rest.errors import InvalidParameterError
from binance_futures.rest.models import EndpointContract, Param, Response
from binance_futures.rest.validation import validate_required_parameters


def build_parameters(contract: EndpointContract, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """인자 → 전송 파라미터 변환

    필수 파라미터(객체 리스트 항목 포함)를 한 번에 검증한 뒤
    필수 → 선택 순서로 전송 이름의 dict를 만든다. None인 선택값은 제외.

    Raises:
        MissingParameterError: 필수 파라미터 누락
        InvalidParameterError: 객체 리스트 파라미터 형식 오류
    """
    checks: dict[str, Any] = {}
    for param in contract.required:
        value = arguments.get(param.name)
        checks[param.name] = value
        if param.item_required and value not in (None, ""):
            checks.update(_item_checks(param, value))
    validate_required_parameters(checks)

    params: dict[str, Any] = {}
    for param in contract.required:
        params[param.wire_name] = param.normalize(arguments.get(param.name))
    for param in contract.options:
        value = arguments.get(param.name)
        if value is not None:
            params[param.wire_name] = param.normalize(value)
    return params


def _item_checks(param: Param, items: Any) -> dict[str, Any]:
    if not isinstance(items, (list, tuple)) or not items:
        raise InvalidParameterError(f"{param.name} must be a non-empty list")

    checks: dict[str, Any] = {}
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InvalidParameterError(f"{param.name}[{index}] must be a mapping")
        for key in param.item_required:
            checks[f"{param.name}[{index}].{key}"] = item.get(key)
    return checks


def build_signature(contract: EndpointContract) -> inspect.Signature:
    """필수 파라미터는 위치 인자, 선택 파라미터는 키워드 전용

    필수 파라미터도 기본값 None을 가진다. 누락은 TypeError가 아니라
    build_parameters에서 MissingParameterError로 보고된다.
    """
    parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    parameters += [
        inspect.Parameter(param.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=None)
        for param in contract.required
    ]
    parameters += [
        inspect.Parameter(param.name, inspect.Parameter.KEYWORD_ONLY, default=None)
        for param in contract.options
    ]
    return inspect.Signature(parameters, return_annotation=Response)


def _build_docstring(contract: EndpointContract) -> str:
    lines = [contract.summary or contract.name, "", f"{contract.method.value} {contract.path}"]
    if contract.signed:
        lines[-1] += " (signed)"
    if contract.required or contract.options:
        lines += ["", "Args:"]
        lines += [f"    {p.name}: {p.wire_name} (필수)" for p in contract.required]
        lines += [f"    {p.name}: {p.wire_name}" for p in contract.options]
    return "\n".join(lines)


def build_operation(contract: EndpointContract) -> Callable[..., Any]:
    """계약으로부터 비동기 메서드 생성"""
    signature = build_signature(contract)

    async def operation(self: Any, *args: Any, **kwargs: Any) -> Response:
        bound = signature.bind(self, *args, **kwargs)
        params = build_parameters(contract, bound.arguments)
        if contract.signed:
            return await self.sign_request(contract.method, contract.path, params)
        return await self.public_request(contract.method, contract.path, params)

    operation.__name__ = contract.name
    operation.__qualname__ = contract.name
    operation.__doc__ = _build_docstring(contract)
    operation.__signature__ = signature  # type: ignore[attr-defined]
    operation.contract = contract  # type: ignore[attr-defined]
    return operation


class EndpointGroup:
    """엔드포인트 그룹 베이스

    서브클래스는 contracts 테이블만 선언하면 메서드가 생성된다.
    그룹을 합성한 클래스에서 같은 이름의 연산이 두 그룹에 있거나,
    연산이 그룹 외 베이스 클래스의 속성을 가리면 TypeError.
    """

    contracts: tuple[EndpointContract, ...] = ()
    _operations: Mapping[str, EndpointContract] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        # 상속된 그룹들의 연산 병합
        merged: dict[str, EndpointContract] = {}
        owners: dict[str, type] = {}
        for base in cls.__bases__:
            if not issubclass(base, EndpointGroup):
                continue
            for name, contract in base._operations.items():
                if name in merged and merged[name] is not contract:
                    raise TypeError(
                        f"{cls.__name__}: operation '{name}' is defined by both "
                        f"{owners[name].__name__} and {base.__name__}"
                    )
                merged[name] = contract
                owners[name] = base

        # 이 클래스가 직접 선언한 연산
        own = cls.__dict__.get("contracts", ())
        for contract in own:
            if contract.name in merged:
                owner = owners.get(contract.name, cls)
                raise TypeError(
                    f"{cls.__name__}: operation '{contract.name}' is already defined by "
                    f"{owner.__name__}"
                )
            merged[contract.name] = contract
            owners[contract.name] = cls
            setattr(cls, contract.name, build_operation(contract))

        # 합성 클래스 본문이 상속된 연산을 덮어쓰는지 검사
        overridden = sorted(
            name for name in merged if name in vars(cls) and owners[name] is not cls
        )
        if overridden:
            raise TypeError(
                f"{cls.__name__}: class body overrides operation(s) {overridden}"
            )

        # 그룹 외 베이스(디스패처 등)의 속성을 가리는지 검사
        for klass in cls.__mro__[1:]:
            if issubclass(klass, EndpointGroup) or klass is object:
                continue
            shadowed = sorted(set(merged) & set(vars(klass)))
            if shadowed:
                raise TypeError(
                    f"{cls.__name__}: operation(s) {shadowed} shadow attributes of "
                    f"{klass.__name__}"
                )

        cls._operations = MappingProxyType(merged)

    @classmethod
    def operations(cls) -> Mapping[str, EndpointContract]:
        """등록된 연산 테이블 (이름 → 계약, 읽기 전용)"""
        return cls._operations
